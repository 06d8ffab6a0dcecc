"""Value and session state for the range selector."""
from __future__ import annotations

from trim_range.model.range_model import LONG_RANGE_THRESHOLD, RangeModel
from trim_range.model.saved_state import SavedRangeState
from trim_range.model.state_store import RangeStateStore
from trim_range.model.touch_session import Handle, TouchSession

__all__ = [
    "Handle",
    "LONG_RANGE_THRESHOLD",
    "RangeModel",
    "RangeStateStore",
    "SavedRangeState",
    "TouchSession",
]
