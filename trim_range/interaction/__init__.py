"""Interaction helpers for the range selector."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class RangeEventKind(Enum):
    """Point in the gesture at which a range notification was emitted."""

    PRESS = "press"
    MOVE = "move"
    RELEASE = "release"


def _noop(*_args) -> None:
    return None


@dataclass
class HostCallbacks:
    """Hooks into the host UI framework. All default to no-ops."""

    claim_drag: Callable[[], None] = _noop
    pressed_changed: Callable[[bool], None] = _noop
    drag_cancelled: Callable[[], None] = _noop
    request_redraw: Callable[[], None] = _noop
