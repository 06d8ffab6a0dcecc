"""Mapping helpers between screen X coordinates and normalized track values."""
from __future__ import annotations

from dataclasses import dataclass


def screen_to_normalized(
    x: float, track_width: float, padding_left: float, padding_right: float
) -> float:
    """Convert a screen X coordinate into a normalized track position.

    Returns ``0.0`` when the padding leaves no usable width instead of
    dividing by zero. The result is not clamped.
    """

    if track_width <= padding_left + padding_right:
        return 0.0
    return (x - padding_left) / (track_width - padding_left - padding_right)


def normalized_to_screen(
    value: float, track_width: float, padding_left: float, padding_right: float
) -> float:
    """Convert a normalized track position into a screen X coordinate."""

    return padding_left + value * (track_width - padding_left - padding_right)


@dataclass(frozen=True)
class TrackLayout:
    """Measured geometry of the track, as reported by the host."""

    width: float
    handle_width: float
    padding_left: float = 0.0
    padding_right: float = 0.0

    @property
    def usable_width(self) -> float:
        return self.width - self.padding_left - self.padding_right

    @property
    def left_edge(self) -> float:
        return self.padding_left

    @property
    def right_edge(self) -> float:
        return self.width - self.padding_right

    @property
    def handle_half_width(self) -> float:
        return self.handle_width / 2.0

    @property
    def inner_width(self) -> float:
        """Track length left once both handle bodies are inset from the edges."""

        return self.usable_width - 2 * self.handle_width

    def to_screen(self, value: float) -> float:
        return normalized_to_screen(
            value, self.width, self.padding_left, self.padding_right
        )

    def to_normalized(self, x: float) -> float:
        return screen_to_normalized(
            x, self.width, self.padding_left, self.padding_right
        )
