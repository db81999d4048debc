"""
Shared pytest fixtures for the press costing test suite.

All tests are pure unit tests; nothing touches the network or a database.
``backend/`` is put on sys.path so ``press_costing.*`` imports resolve
wherever pytest is invoked from.
"""
import os
import sys

import pytest

_BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)

from press_costing.models.job import JobParameters, LayoutCandidate  # noqa: E402

_ENV_VARS = (
    "DIGITAL_PER_CLICK",
    "DIGITAL_PARENT_SHEET_COST",
    "DIGITAL_WASTE_PARENTS",
    "FALLBACK_PAPER_COST_PER_SHEET",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def business_card():
    """9 x 5.5 cm, 1000 off, one side, four colours, 0.24 per sheet."""
    return JobParameters(piece_width=9, piece_height=5.5, quantity=1000,
                         sides=1, colors=4, paper_cost_per_sheet=0.24)


@pytest.fixture
def large_sheet():
    return LayoutCandidate(parent_width=65, parent_height=90, cut_pieces=1, label="65×90")


@pytest.fixture
def small_sheet():
    return LayoutCandidate(parent_width=35, parent_height=50, cut_pieces=1, label="35×50")


@pytest.fixture
def materials():
    return [
        {"name": "Art Paper", "gsm": "150", "price_per_sheet": "0.24"},
        {"name": "Art Card", "gsm": 300, "price_per_packet": "1,200", "sheets_per_packet": 500},
        {"name": "Bond", "gsm": 80},
    ]
