"""Offset costing: imposition, sheets, plates and the unit price table.

Everything here is a pure function of its arguments. Unusable layouts are
reported with ``total == 0`` rather than an exception, and
``pick_cheapest_total`` drops them.
"""
import logging
import math
from typing import List, Optional, Sequence

from press_costing.models.job import EvaluatedRow, JobParameters, LayoutCandidate
from press_costing.models.pricing import DEFAULT_OFFSET_PRICING, OffsetPricing

logger = logging.getLogger(__name__)


def unit_price(units: float, pricing: Optional[OffsetPricing] = None) -> float:
    p = pricing or DEFAULT_OFFSET_PRICING
    u = max(0, math.floor(units))
    if u <= p.tier1_limit:
        return p.tier1_rate * u
    if u <= p.tier2_limit:
        return p.tier2_rate * u - u * u
    return p.tier3_rate * u


def imposition_count(piece_width: float, piece_height: float,
                     parent_width: float, parent_height: float,
                     gap: float = 1.0) -> int:
    """Best of the two grid orientations, each piece padded by `gap` cm."""
    opt1 = math.floor(parent_width / (piece_height + gap)) * math.floor(parent_height / (piece_width + gap))
    opt2 = math.floor(parent_width / (piece_width + gap)) * math.floor(parent_height / (piece_height + gap))
    return max(opt1, opt2)


def calc_row_total(job: JobParameters, row: LayoutCandidate,
                   pricing: Optional[OffsetPricing] = None) -> EvaluatedRow:
    p = pricing or DEFAULT_OFFSET_PRICING

    ups = imposition_count(job.piece_width, job.piece_height,
                           row.parent_width, row.parent_height, p.gap)

    # double-sided work needs an even count for back registration
    parity_ok = True if job.sides == 1 else ups % 2 == 0

    ups_per_sheet = ups * row.cut_pieces
    waste_base = p.waste_large if row.parent_width > p.waste_width_threshold else p.waste_small
    waste_sheets = math.ceil(waste_base / row.cut_pieces)
    sheets = 0 if ups_per_sheet == 0 else math.ceil(job.quantity / ups_per_sheet + waste_sheets)

    paper_cost = sheets * job.paper_cost_per_sheet

    core_units = math.ceil((sheets * row.cut_pieces * job.colors * job.sides) / p.units_divisor)
    base_units = max(job.colors, core_units)
    units = base_units if parity_ok else base_units * 2
    price = unit_price(units, p)

    plate_rate = p.plate_rate_large if row.parent_width > p.plate_width_threshold else p.plate_rate_small
    plate_per_side = plate_rate * job.colors
    plate_total = plate_per_side * job.sides

    total = 0.0 if sheets == 0 or ups == 0 else price + paper_cost + plate_total

    return EvaluatedRow(
        # rows may be re-evaluated, so copy only the candidate fields
        **row.model_dump(include=set(LayoutCandidate.model_fields)),
        imposition_count=ups,
        parity_adjusted=parity_ok,
        ups_per_sheet=ups_per_sheet,
        waste_sheets=waste_sheets,
        sheets_required=sheets,
        paper_cost=paper_cost,
        units=units,
        unit_price=price,
        plate_per_side=plate_per_side,
        plate_total=plate_total,
        total=total,
    )


def _is_usable(row: EvaluatedRow) -> bool:
    return (row.total > 0 and row.sheets_required > 0
            and row.imposition_count > 0 and row.ups_per_sheet > 0)


def pick_cheapest_total(job: JobParameters, candidates: Sequence[LayoutCandidate],
                        pricing: Optional[OffsetPricing] = None) -> List[EvaluatedRow]:
    """Evaluate every candidate and return the usable ones, cheapest first.

    The sort is stable, so equal totals keep the caller's candidate order. An
    empty list means no layout fits the job.
    """
    rows = [calc_row_total(job, c, pricing) for c in candidates]
    for r in rows:
        logger.debug("candidate %s ups=%s sheets=%s total=%s",
                     r.label or (r.parent_width, r.parent_height, r.cut_pieces),
                     r.imposition_count, r.sheets_required, r.total)

    valid = sorted((r for r in rows if _is_usable(r)), key=lambda r: r.total)

    if not valid:
        logger.warning("No usable offset layout among %s candidates", len(rows))
        return []

    logger.info("Offset costing: %s usable layouts, cheapest total=%s", len(valid), valid[0].total)
    return valid
