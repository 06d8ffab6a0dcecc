"""Single-listener range change notifications."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from trim_range.interaction import RangeEventKind
from trim_range.model.touch_session import Handle

RangeChangedListener = Callable[
    [float, float, RangeEventKind, bool, Optional[Handle]], None
]

logger = logging.getLogger(__name__)


class ChangeNotifier:
    """Forwards range changes to at most one external listener."""

    def __init__(self, listener: RangeChangedListener | None = None) -> None:
        self._listener = listener

    @property
    def listener(self) -> RangeChangedListener | None:
        return self._listener

    def set_listener(self, listener: RangeChangedListener | None) -> None:
        self._listener = listener

    def notify(
        self,
        selected_min: float,
        selected_max: float,
        kind: RangeEventKind,
        collapsed: bool,
        pressed_handle: Handle | None,
    ) -> None:
        logger.debug(
            "Range changed: kind=%s min=%s max=%s collapsed=%s handle=%s",
            kind.value,
            selected_min,
            selected_max,
            collapsed,
            pressed_handle,
        )
        if self._listener is None:
            return
        self._listener(selected_min, selected_max, kind, collapsed, pressed_handle)
