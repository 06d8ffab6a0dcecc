"""Interaction core for a dual-handle range selector."""
from __future__ import annotations

from trim_range.config import RangeSeekBarConfig
from trim_range.geometry.mapping import TrackLayout
from trim_range.interaction import HostCallbacks, RangeEventKind
from trim_range.interaction.events import Pointer, PointerAction, PointerEvent
from trim_range.model.saved_state import SavedRangeState
from trim_range.model.touch_session import Handle
from trim_range.range_seekbar import RangeSeekBar

__version__ = "0.1.0"

__all__ = [
    "Handle",
    "HostCallbacks",
    "Pointer",
    "PointerAction",
    "PointerEvent",
    "RangeEventKind",
    "RangeSeekBar",
    "RangeSeekBarConfig",
    "SavedRangeState",
    "TrackLayout",
]
