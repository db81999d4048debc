"""Per-click costing for digital presses."""
import logging
import math
from typing import List, Optional, Sequence, Tuple

from press_costing.models.job import DigitalOption, JobParameters
from press_costing.models.pricing import DEFAULT_DIGITAL_PRICING, DigitalPricing
from press_costing.services.catalog import DIGITAL_SHEET_OPTIONS

logger = logging.getLogger(__name__)

GAP_CM = 1.0


def digital_colors(requested: int) -> int:
    """Digital presses run either mono or full colour."""
    return 1 if requested <= 3 else 4


def digital_ups(piece_width: float, piece_height: float,
                sheet_width: float, sheet_height: float,
                allow_rotate: bool = True) -> int:
    upright = math.floor(sheet_width / (piece_width + GAP_CM)) * math.floor(sheet_height / (piece_height + GAP_CM))
    if not allow_rotate:
        return upright
    rotated = math.floor(sheet_width / (piece_height + GAP_CM)) * math.floor(sheet_height / (piece_width + GAP_CM))
    return max(upright, rotated)


def evaluate_digital_options(
    job: JobParameters,
    sheets: Optional[Sequence[Tuple[float, float]]] = None,
    pricing: Optional[DigitalPricing] = None,
    allow_rotate: bool = True,
    use_job_paper_cost: bool = True,
) -> List[DigitalOption]:
    """Cost the job on each digital sheet size, skipping sizes it doesn't fit.

    Paper is priced at the job's own paper_cost_per_sheet by default, so a
    quote for a costed stock uses that stock's price. Pass
    use_job_paper_cost=False to price every sheet at the rate card's flat
    parent_sheet_cost instead.
    """
    p = pricing or DEFAULT_DIGITAL_PRICING
    sheet_cost = job.paper_cost_per_sheet if use_job_paper_cost else p.parent_sheet_cost
    options: List[DigitalOption] = []

    for w, h in (sheets if sheets is not None else DIGITAL_SHEET_OPTIONS):
        ups = digital_ups(job.piece_width, job.piece_height, w, h, allow_rotate)
        if ups == 0:
            logger.debug("digital sheet %sx%s: piece does not fit", w, h)
            continue
        n_sheets = math.ceil(job.quantity / ups + p.waste_parents)
        paper = n_sheets * sheet_cost
        clicks = n_sheets * ups * p.per_click * job.sides
        options.append(DigitalOption(
            label=f"{w:g}×{h:g} cm",
            sheet_width=w,
            sheet_height=h,
            ups_per_sheet=ups,
            sheets=n_sheets,
            paper_cost=paper,
            click_cost=clicks,
            total=paper + clicks,
        ))
    return options


def pick_cheapest_digital(job: JobParameters, **kwargs) -> List[DigitalOption]:
    options = sorted(evaluate_digital_options(job, **kwargs), key=lambda o: o.total)
    if not options:
        logger.warning("Piece %sx%s fits no digital sheet", job.piece_width, job.piece_height)
    else:
        logger.info("Digital costing: %s options, cheapest total=%s", len(options), options[0].total)
    return options
