from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class JobParameters(BaseModel):
    """Inputs for one costing run. Dimensions are centimetres."""

    model_config = ConfigDict(frozen=True)

    piece_width: float = Field(..., gt=0, allow_inf_nan=False)
    piece_height: float = Field(..., gt=0, allow_inf_nan=False)
    quantity: int = Field(..., ge=1)
    sides: int = Field(..., ge=1, le=2)
    colors: int = Field(..., ge=1)
    paper_cost_per_sheet: float = Field(..., ge=0, allow_inf_nan=False)


class LayoutCandidate(BaseModel):
    """A parent sheet pre-cut into `cut_pieces` identical sections."""

    model_config = ConfigDict(frozen=True)

    parent_width: float = Field(..., gt=0, allow_inf_nan=False)
    parent_height: float = Field(..., gt=0, allow_inf_nan=False)
    cut_pieces: int = Field(..., ge=1)
    label: Optional[str] = None


class EvaluatedRow(LayoutCandidate):
    imposition_count: int
    parity_adjusted: bool
    ups_per_sheet: int
    waste_sheets: int
    sheets_required: int
    paper_cost: float
    units: int
    unit_price: float
    plate_per_side: float
    plate_total: float
    # 0 means the layout is unusable
    total: float


class DigitalOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    sheet_width: float
    sheet_height: float
    ups_per_sheet: int
    sheets: int
    paper_cost: float
    click_cost: float
    total: float
