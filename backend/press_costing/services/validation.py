import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from pydantic import ValidationError

from press_costing.config import fallback_paper_cost
from press_costing.models.job import JobParameters
from press_costing.services.catalog import CUT_SIZE_CANDIDATES
from press_costing.services.materials import lookup_paper_price, resolve_price_per_sheet
from press_costing.utils.numbers import parse_colors_count, parse_size, to_number

logger = logging.getLogger(__name__)

DEFAULT_COLORS = 4
DEFAULT_SIDES = 2

REVIEW_ISSUES = {"paper_price_unknown"}


def fits_sheet(width: float, height: float, sheet_width: float, sheet_height: float) -> bool:
    """True when the piece fits the sheet in either orientation (no gaps)."""
    return ((width <= sheet_width and height <= sheet_height)
            or (width <= sheet_height and height <= sheet_width))


class JobValidator:
    """Turns a loose quote-form spec into JobParameters.

    Rules:
    - missing or unparsable size, non-positive dimensions -> rejected
    - quantity not a whole number >= 1 -> rejected
    - sides other than 1 or 2, colours given but unreadable -> rejected
    - piece larger than every available sheet -> rejected
    - explicit paper price negative or unreadable -> rejected
    - no paper price from any source -> needs_review

    Issues are returned sorted so the result is deterministic.
    """

    def __init__(self, materials: Optional[Iterable[Mapping[str, Any]]] = None,
                 sheets: Optional[Sequence[Tuple[float, float]]] = None):
        self.materials = list(materials or [])
        if sheets is None:
            sheets = [(c.parent_width, c.parent_height) for c in CUT_SIZE_CANDIDATES]
        self.sheets = list(sheets)

    def _add_issue(self, issues: List[str], issue: str) -> None:
        if issue not in issues:
            issues.append(issue)

    def _piece_size(self, spec: Mapping[str, Any], issues: List[str]) -> Optional[Tuple[float, float]]:
        w, h = spec.get("piece_width"), spec.get("piece_height")
        if w is not None or h is not None:
            size = (to_number(w), to_number(h))
            if size[0] is None or size[1] is None:
                self._add_issue(issues, "invalid_size")
                return None
        elif spec.get("size"):
            size = parse_size(str(spec["size"]))
            if size is None:
                self._add_issue(issues, "invalid_size")
                return None
        else:
            self._add_issue(issues, "missing_size")
            return None

        if size[0] <= 0 or size[1] <= 0:
            self._add_issue(issues, "invalid_size")
            return None
        return size

    def _quantity(self, spec: Mapping[str, Any], issues: List[str]) -> Optional[int]:
        q = to_number(spec.get("quantity"))
        if q is None or q < 1 or q != int(q):
            self._add_issue(issues, "invalid_quantity")
            return None
        return int(q)

    def _sides(self, spec: Mapping[str, Any], issues: List[str]) -> Optional[int]:
        raw = spec.get("sides")
        if raw is None or raw == "":
            return DEFAULT_SIDES
        s = to_number(raw)
        if s not in (1, 2):
            self._add_issue(issues, "invalid_sides")
            return None
        return int(s)

    def _colors(self, spec: Mapping[str, Any], issues: List[str]) -> Optional[int]:
        keys = ("colors", "colors_front", "colors_back")
        given = [spec.get(k) for k in keys if spec.get(k) not in (None, "")]
        if not given:
            return DEFAULT_COLORS
        count = max(parse_colors_count(v) for v in given)
        if count < 1:
            self._add_issue(issues, "invalid_colors")
            return None
        return count

    def resolve_paper_cost(self, spec: Mapping[str, Any], issues: List[str]) -> Optional[float]:
        """Explicit price, then packet price, then materials, then the configured fallback."""
        if spec.get("paper_cost_per_sheet") not in (None, ""):
            price = to_number(spec.get("paper_cost_per_sheet"))
            if price is None or price < 0:
                self._add_issue(issues, "invalid_paper_price")
                return None
            return price

        price = resolve_price_per_sheet({
            "price_per_packet": spec.get("price_per_packet"),
            "sheets_per_packet": spec.get("sheets_per_packet"),
        })
        if price is not None:
            return price

        if spec.get("paper_name"):
            price = lookup_paper_price(self.materials, spec.get("paper_name"), spec.get("gsm"))
            if price is not None:
                return price

        price = fallback_paper_cost()
        if price is not None:
            logger.info("Using fallback paper cost %s for paper=%s", price, spec.get("paper_name"))
            return price

        self._add_issue(issues, "paper_price_unknown")
        return None

    def validate(self, spec: Mapping[str, Any]) -> Dict[str, Any]:
        issues: List[str] = []

        size = self._piece_size(spec, issues)
        quantity = self._quantity(spec, issues)
        sides = self._sides(spec, issues)
        colors = self._colors(spec, issues)
        paper_cost = self.resolve_paper_cost(spec, issues)

        if size and self.sheets and not any(fits_sheet(size[0], size[1], w, h) for w, h in self.sheets):
            self._add_issue(issues, "piece_exceeds_sheet")

        job = None
        if not issues:
            try:
                job = JobParameters(
                    piece_width=size[0],
                    piece_height=size[1],
                    quantity=quantity,
                    sides=sides,
                    colors=colors,
                    paper_cost_per_sheet=paper_cost,
                )
            except ValidationError as e:
                logger.warning("Rejected job spec: %s", e)
                self._add_issue(issues, "invalid_job")

        if any(i not in REVIEW_ISSUES for i in issues):
            decision = "rejected"
        elif issues:
            decision = "needs_review"
        else:
            decision = "costable"

        return {"decision": decision, "issues": sorted(issues), "job": job}
