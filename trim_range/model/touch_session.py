"""Live state of an in-progress pointer interaction.

The session is owned by the drag controller and mutated in response to
pointer events. It is transient (never persisted); the host may read
``pressed_handle`` and ``is_pressed`` to highlight a handle while drawing.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Handle(Enum):
    """One of the two draggable endpoints of the selection."""

    MIN = "min"
    MAX = "max"


@dataclass
class TouchSession:
    active_pointer_id: int | None = None
    down_x: float = 0.0
    is_dragging: bool = False
    is_pressed: bool = False
    pressed_handle: Handle | None = None
    collapsed: bool = False

    def reset(self) -> None:
        """Return to the idle state."""
        self.active_pointer_id = None
        self.down_x = 0.0
        self.is_dragging = False
        self.is_pressed = False
        self.pressed_handle = None
        self.collapsed = False

    def anchor(self, pointer_id: int, x: float) -> None:
        self.active_pointer_id = pointer_id
        self.down_x = x
