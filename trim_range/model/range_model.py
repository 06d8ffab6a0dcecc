"""Normalized value model for the two range handles.

The model keeps two pairs of normalized values. ``min_value``/``max_value``
follow the handles on screen, while ``min_value_time``/``max_value_time`` are
the committed values that absolute getters report. Every setter clamps; no
input is ever rejected.
"""
from __future__ import annotations

import math

from trim_range.model.saved_state import SavedRangeState

# Spans longer than this (five minutes in milliseconds) keep sub-pixel gaps.
LONG_RANGE_THRESHOLD = 5 * 60 * 1000
MIN_GAP_DECIMALS = 4


def clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


class RangeModel:
    """Owns the normalized selection and converts it to absolute values."""

    def __init__(
        self,
        bounds_min: float = 0.0,
        bounds_max: float = 1.0,
        minimum_span: float = 0.0,
        long_range_threshold: float = LONG_RANGE_THRESHOLD,
    ) -> None:
        self._bounds_min = float(bounds_min)
        self._bounds_max = float(bounds_max)
        self._minimum_span = float(minimum_span)
        self._long_range_threshold = float(long_range_threshold)
        self._min_value = 0.0
        self._max_value = 1.0
        self._min_value_time = 0.0
        self._max_value_time = 1.0

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def bounds(self) -> tuple[float, float]:
        return self._bounds_min, self._bounds_max

    @property
    def span(self) -> float:
        return self._bounds_max - self._bounds_min

    @property
    def minimum_span(self) -> float:
        return self._minimum_span

    @property
    def long_range_threshold(self) -> float:
        return self._long_range_threshold

    def set_absolute_bounds(self, bounds_min: float, bounds_max: float) -> None:
        self._bounds_min = float(bounds_min)
        self._bounds_max = float(bounds_max)

    def set_minimum_span(self, duration: float) -> None:
        self._minimum_span = float(duration)

    @property
    def is_inert(self) -> bool:
        """True when no sub-range as wide as the minimum span can exist."""

        return self.span <= self._minimum_span

    # ------------------------------------------------------------------
    # Normalized values
    # ------------------------------------------------------------------
    @property
    def min_value(self) -> float:
        return self._min_value

    @property
    def max_value(self) -> float:
        return self._max_value

    @property
    def min_value_time(self) -> float:
        return self._min_value_time

    @property
    def max_value_time(self) -> float:
        return self._max_value_time

    def set_min_value(self, value: float) -> None:
        self._min_value = clamp_unit(min(value, self._max_value))

    def set_max_value(self, value: float) -> None:
        self._max_value = clamp_unit(max(value, self._min_value))

    def set_committed_min(self, value: float) -> None:
        self._min_value_time = clamp_unit(value)

    def set_committed_max(self, value: float) -> None:
        self._max_value_time = clamp_unit(value)

    # ------------------------------------------------------------------
    # Absolute values
    # ------------------------------------------------------------------
    def value_to_normalized(self, value: float) -> float:
        if self.span == 0:
            return 0.0
        return (value - self._bounds_min) / self.span

    def normalized_to_value(self, normalized: float) -> float:
        return self._bounds_min + normalized * self.span

    def set_selected_min(self, value: float) -> None:
        if self.span == 0:
            self.set_min_value(0.0)
        else:
            self.set_min_value(self.value_to_normalized(value))
        self._min_value_time = self._min_value

    def set_selected_max(self, value: float) -> None:
        if self.span == 0:
            self.set_max_value(1.0)
        else:
            self.set_max_value(self.value_to_normalized(value))
        self._max_value_time = self._max_value

    def selected_min(self) -> float:
        return self.normalized_to_value(self._min_value_time)

    def selected_max(self) -> float:
        return self.normalized_to_value(self._max_value_time)

    # ------------------------------------------------------------------
    # Minimum gap
    # ------------------------------------------------------------------
    def min_gap_px(self, track_width: float, handle_width: float) -> float:
        """Pixel distance the inner edges of the handles must keep apart.

        Long spans keep four decimals since one pixel covers many domain
        units there; short spans round up to a whole pixel.
        """

        if self.span <= 0:
            return 0.0
        raw = self._minimum_span / self.span * (track_width - 2 * handle_width)
        if self.span > self._long_range_threshold:
            return round(raw, MIN_GAP_DECIMALS)
        return float(math.ceil(raw))

    # ------------------------------------------------------------------
    # Save / restore
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self._min_value = 0.0
        self._max_value = 1.0
        self._min_value_time = 0.0
        self._max_value_time = 1.0

    def snapshot(self) -> SavedRangeState:
        return SavedRangeState(
            normalized_min=self._min_value,
            normalized_max=self._max_value,
            normalized_min_time=self._min_value_time,
            normalized_max_time=self._max_value_time,
        )

    def restore(self, state: SavedRangeState) -> None:
        self._min_value = state.normalized_min
        self._max_value = state.normalized_max
        self._min_value_time = state.normalized_min_time
        self._max_value_time = state.normalized_max_time
