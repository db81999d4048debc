from pydantic import BaseModel, ConfigDict, Field


class OffsetPricing(BaseModel):
    """Rate card for offset jobs.

    Defaults reproduce the shop's "Print and Plate" sheet. The waste and plate
    width breakpoints are deliberately separate values.
    """

    model_config = ConfigDict(frozen=True)

    # unit price tiers
    tier1_limit: int = 10
    tier2_limit: int = 20
    tier1_rate: float = 50.0
    tier2_rate: float = 60.0
    tier3_rate: float = 40.0

    # spacing added to each piece edge when imposing, cm
    gap: float = Field(1.0, ge=0)

    waste_width_threshold: float = 50.0
    waste_large: int = 120
    waste_small: int = 100

    units_divisor: int = Field(1000, ge=1)

    plate_width_threshold: float = 54.0
    plate_rate_large: float = 50.0
    plate_rate_small: float = 20.0


class DigitalPricing(BaseModel):
    model_config = ConfigDict(frozen=True)

    per_click: float = Field(0.10, ge=0)
    parent_sheet_cost: float = Field(5.00, ge=0)
    waste_parents: int = Field(3, ge=0)


DEFAULT_OFFSET_PRICING = OffsetPricing()
DEFAULT_DIGITAL_PRICING = DigitalPricing()
