"""Standard sheet catalogs offered to the costing engines."""
from typing import List, Tuple

from press_costing.models.job import LayoutCandidate


def _cut(w: float, h: float, pcs: int) -> LayoutCandidate:
    return LayoutCandidate(parent_width=w, parent_height=h, cut_pieces=pcs,
                           label=f"{w:g}×{h:g} / Cp{pcs}")


# press-sheet sizes cut from the shop's parent stock, with pieces per parent
CUT_SIZE_CANDIDATES: List[LayoutCandidate] = [
    _cut(20, 14, 25),
    _cut(20, 17.5, 20),
    _cut(23, 14, 21),
    _cut(23, 16.5, 18),
    _cut(23, 20, 15),
    _cut(23, 52, 5),
    _cut(25, 14, 20),
    _cut(25, 17.5, 16),
    _cut(25, 20, 14),
    _cut(25, 23, 12),
    _cut(28, 14, 17),
    _cut(30, 14, 16),
    _cut(30, 17.5, 13),
    _cut(30, 20, 11),
    _cut(30, 23, 9),
    _cut(35, 14, 14),
    _cut(35, 17.5, 11),
    _cut(35, 20, 10),
    _cut(35, 23, 8),
    _cut(35, 25, 7),
    _cut(40, 14, 12),
    _cut(40, 17.5, 10),
    _cut(40, 20, 8),
    _cut(40, 23, 7),
    _cut(40, 25, 6),
    _cut(40, 30, 5),
    _cut(40, 35, 4),
    _cut(45, 20, 7),
    _cut(45, 25, 5),
    _cut(45, 30, 4),
    _cut(45, 35, 3),
    _cut(50, 20, 6),
    _cut(50, 25, 5),
    _cut(50, 30, 4),
    _cut(50, 35, 4),
]

# (width, height) in cm
DIGITAL_SHEET_OPTIONS: List[Tuple[float, float]] = [
    (48, 33),
    (70, 33),
    (100, 33),
]
