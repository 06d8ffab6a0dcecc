"""Decide which handle, if any, a touch grabs."""
from __future__ import annotations

from trim_range.model.touch_session import Handle

DEFAULT_HIT_TOLERANCE_SCALE = 2.0


def is_in_handle_range(
    touch_x: float, handle_x: float, handle_half_width: float, scale: float
) -> bool:
    return abs(touch_x - handle_x) <= handle_half_width * scale


class ThumbHitTester:
    """Hit testing with a grab window wider than the drawn handle."""

    def __init__(self, tolerance_scale: float = DEFAULT_HIT_TOLERANCE_SCALE) -> None:
        self.tolerance_scale = tolerance_scale

    def hit_test(
        self,
        touch_x: float,
        min_handle_x: float,
        max_handle_x: float,
        handle_half_width: float,
        track_width: float,
    ) -> Handle | None:
        min_hit = is_in_handle_range(
            touch_x, min_handle_x, handle_half_width, self.tolerance_scale
        )
        max_hit = is_in_handle_range(
            touch_x, max_handle_x, handle_half_width, self.tolerance_scale
        )
        if min_hit and max_hit:
            # Overlapping handles: right half grabs MIN, left half grabs MAX.
            if track_width > 0 and touch_x / track_width > 0.5:
                return Handle.MIN
            return Handle.MAX
        if min_hit:
            return Handle.MIN
        if max_hit:
            return Handle.MAX
        return None
