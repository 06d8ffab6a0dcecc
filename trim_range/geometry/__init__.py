"""Coordinate helpers for the range selector track."""
from __future__ import annotations

from trim_range.geometry.mapping import (
    TrackLayout,
    normalized_to_screen,
    screen_to_normalized,
)

__all__ = ["TrackLayout", "normalized_to_screen", "screen_to_normalized"]
