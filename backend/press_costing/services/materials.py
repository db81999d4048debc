"""Paper price lookup: (paper name, gsm) -> price per sheet."""
import logging
from typing import Any, Iterable, Mapping, Optional

from press_costing.utils.numbers import to_number

logger = logging.getLogger(__name__)


def resolve_price_per_sheet(paper: Optional[Mapping[str, Any]]) -> Optional[float]:
    """Per-sheet price, falling back to packet price / sheets per packet.

    The order matters: an explicit per-sheet price always wins.
    """
    if not paper:
        return None

    pps = to_number(paper.get("price_per_sheet"))
    if pps is not None:
        return pps

    ppp = to_number(paper.get("price_per_packet"))
    spp = to_number(paper.get("sheets_per_packet"))
    if ppp is not None and spp is not None and spp > 0:
        return ppp / spp
    return None


def find_material(materials: Optional[Iterable[Mapping[str, Any]]],
                  name: Optional[str], gsm: Any) -> Optional[Mapping[str, Any]]:
    if not materials:
        return None
    target_name = (name or "").strip().lower()
    target_gsm = to_number(gsm)
    if not target_name or target_gsm is None:
        return None

    for m in materials:
        nm = (m.get("name") or "").strip().lower()
        g = to_number(m.get("gsm"))
        if nm and g is not None and nm == target_name and g == target_gsm:
            return m
    return None


def lookup_paper_price(materials: Optional[Iterable[Mapping[str, Any]]],
                       name: Optional[str], gsm: Any) -> Optional[float]:
    """Return the per-sheet price, or None when the price is unknown."""
    match = find_material(materials, name, gsm)
    if match is None:
        logger.warning("No material found for paper=%s gsm=%s", name, gsm)
        return None
    price = resolve_price_per_sheet(match)
    if price is None:
        logger.warning("Material paper=%s gsm=%s has no usable price", name, gsm)
    return price
