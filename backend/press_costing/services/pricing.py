import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from press_costing.config import load_digital_pricing
from press_costing.models.job import LayoutCandidate
from press_costing.models.pricing import DigitalPricing, OffsetPricing
from press_costing.services.catalog import CUT_SIZE_CANDIDATES, DIGITAL_SHEET_OPTIONS
from press_costing.services.costing import pick_cheapest_total
from press_costing.services.digital import digital_colors, pick_cheapest_digital
from press_costing.services.validation import JobValidator

logger = logging.getLogger(__name__)

PROCESSES = ("offset", "digital")


class QuoteEstimator:
    """Quotes one printed item: validates the spec, costs every sheet option
    for the chosen process and reports the cheapest."""

    def __init__(self, materials: Optional[Iterable[Mapping[str, Any]]] = None,
                 candidates: Optional[Sequence[LayoutCandidate]] = None,
                 offset_pricing: Optional[OffsetPricing] = None,
                 digital_pricing: Optional[DigitalPricing] = None):
        self.materials = list(materials or [])
        self.candidates = list(candidates) if candidates is not None else list(CUT_SIZE_CANDIDATES)
        self.offset_pricing = offset_pricing
        self.digital_pricing = digital_pricing

    def _choose_process(self, spec: Mapping[str, Any]) -> Optional[str]:
        process = str(spec.get("printing") or "offset").strip().lower()
        return process if process in PROCESSES else None

    def _empty(self, process: Optional[str], decision: str, issues) -> Dict[str, Any]:
        return {
            "process": process,
            "decision": decision,
            "issues": sorted(issues),
            "options": [],
            "selected": None,
            "recommended_sheets": None,
            "final_price": None,
        }

    def estimate(self, spec: Mapping[str, Any]) -> Dict[str, Any]:
        process = self._choose_process(spec)
        if process is None:
            logger.warning("Unsupported printing process: %s", spec.get("printing"))
            return self._empty(None, "rejected", ["unsupported_process"])

        if process == "digital":
            sheets = DIGITAL_SHEET_OPTIONS
        else:
            sheets = [(c.parent_width, c.parent_height) for c in self.candidates]
        validation = JobValidator(self.materials, sheets).validate(spec)
        job = validation["job"]
        if job is None:
            logger.info("Quote not costable process=%s decision=%s issues=%s",
                        process, validation["decision"], validation["issues"])
            return self._empty(process, validation["decision"], validation["issues"])

        if process == "digital":
            pricing = self.digital_pricing or load_digital_pricing()
            options = pick_cheapest_digital(job, pricing=pricing)
            recommended = options[0].sheets if options else None
        else:
            options = pick_cheapest_total(job, self.candidates, self.offset_pricing)
            recommended = options[0].sheets_required if options else None

        if not options:
            return self._empty(process, "rejected", ["no_feasible_layout"])

        selected = options[0]
        result = {
            "process": process,
            "decision": validation["decision"],
            "issues": validation["issues"],
            "options": [o.model_dump() for o in options],
            "selected": selected.model_dump(),
            "recommended_sheets": recommended,
            "final_price": round(selected.total, 2),
        }
        if process == "digital":
            result["colors"] = digital_colors(job.colors)
        logger.info("Quote process=%s sheets=%s final_price=%s", process, recommended, result["final_price"])
        return result
