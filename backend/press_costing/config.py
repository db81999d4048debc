import logging
import os
from typing import Optional

from press_costing.models.pricing import DEFAULT_DIGITAL_PRICING, DigitalPricing

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_digital_pricing() -> DigitalPricing:
    """Digital rate card, overridable through DIGITAL_* environment variables."""
    waste = _env_float("DIGITAL_WASTE_PARENTS", DEFAULT_DIGITAL_PRICING.waste_parents)
    if waste != int(waste):
        raise ValueError(f"DIGITAL_WASTE_PARENTS must be a whole number, got {waste}")
    return DigitalPricing(
        per_click=_env_float("DIGITAL_PER_CLICK", DEFAULT_DIGITAL_PRICING.per_click),
        parent_sheet_cost=_env_float("DIGITAL_PARENT_SHEET_COST", DEFAULT_DIGITAL_PRICING.parent_sheet_cost),
        waste_parents=int(waste),
    )


def fallback_paper_cost() -> Optional[float]:
    """Price used when a paper has no known price. None disables the fallback."""
    value = _env_float("FALLBACK_PAPER_COST_PER_SHEET", None)
    if value is not None and value < 0:
        raise ValueError(f"FALLBACK_PAPER_COST_PER_SHEET must not be negative, got {value}")
    return value


def configure_logging(level: Optional[str] = None) -> None:
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got {level!r}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
