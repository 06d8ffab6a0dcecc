"""Host-facing facade wiring the range model to the drag controller."""
from __future__ import annotations

import logging
from typing import Callable

from trim_range.config import RangeSeekBarConfig
from trim_range.geometry.mapping import TrackLayout
from trim_range.interaction import HostCallbacks
from trim_range.interaction.drag_controller import DragController
from trim_range.interaction.events import PointerEvent
from trim_range.interaction.hit_testing import ThumbHitTester
from trim_range.interaction.notifier import ChangeNotifier, RangeChangedListener
from trim_range.model.range_model import RangeModel
from trim_range.model.saved_state import SavedRangeState
from trim_range.model.touch_session import Handle

logger = logging.getLogger(__name__)


class RangeSeekBar:
    """Dual-handle range selector without any rendering.

    The host supplies a layout query (called fresh for every event) and feeds
    :class:`PointerEvent` objects to :meth:`on_touch_event`. Drawing code
    reads :attr:`min_handle_x`, :attr:`max_handle_x` and
    :attr:`pressed_handle`.
    """

    def __init__(
        self,
        layout_provider: Callable[[], TrackLayout],
        config: RangeSeekBarConfig | None = None,
        callbacks: HostCallbacks | None = None,
        listener: RangeChangedListener | None = None,
    ) -> None:
        config = config or RangeSeekBarConfig()
        self._layout_provider = layout_provider
        self._model = RangeModel(
            config.bounds_min,
            config.bounds_max,
            config.minimum_span,
            long_range_threshold=config.long_range_threshold,
        )
        self._notifier = ChangeNotifier(listener)
        self._controller = DragController(
            self._model,
            layout_provider,
            self._notifier,
            callbacks=callbacks,
            hit_tester=ThumbHitTester(config.hit_tolerance_scale),
            touch_slop=config.touch_slop,
            snap_tolerance_scale=config.snap_tolerance_scale,
            edge_snap_fraction=config.edge_snap_fraction,
            notify_while_dragging=config.notify_while_dragging,
        )

    @property
    def model(self) -> RangeModel:
        return self._model

    @property
    def controller(self) -> DragController:
        return self._controller

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_absolute_bounds(self, bounds_min: float, bounds_max: float) -> None:
        self._model.set_absolute_bounds(bounds_min, bounds_max)

    def set_minimum_span(self, duration: float) -> None:
        self._model.set_minimum_span(duration)

    @property
    def notify_while_dragging(self) -> bool:
        return self._controller.notify_while_dragging

    def set_notify_while_dragging(self, flag: bool) -> None:
        self._controller.notify_while_dragging = flag

    def set_touch_locked(self, locked: bool) -> None:
        """While locked every pointer event passes through untouched."""
        self._controller.touch_locked = locked

    def set_enabled(self, enabled: bool) -> None:
        self._controller.enabled = enabled
        if not enabled:
            self._controller.reset()

    def set_listener(self, listener: RangeChangedListener | None) -> None:
        self._notifier.set_listener(listener)

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------
    def set_selected_min(self, value: float) -> None:
        self._model.set_selected_min(value)

    def set_selected_max(self, value: float) -> None:
        self._model.set_selected_max(value)

    def selected_min(self) -> float:
        return self._model.selected_min()

    def selected_max(self) -> float:
        return self._model.selected_max()

    def set_normalized_min(self, value: float) -> None:
        self._model.set_min_value(value)

    def set_normalized_max(self, value: float) -> None:
        self._model.set_max_value(value)

    @property
    def normalized_min(self) -> float:
        return self._model.min_value

    @property
    def normalized_max(self) -> float:
        return self._model.max_value

    # ------------------------------------------------------------------
    # Rendering reads
    # ------------------------------------------------------------------
    @property
    def min_handle_x(self) -> float:
        return self._layout_provider().to_screen(self._model.min_value)

    @property
    def max_handle_x(self) -> float:
        return self._layout_provider().to_screen(self._model.max_value)

    @property
    def pressed_handle(self) -> Handle | None:
        return self._controller.pressed_handle

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def on_touch_event(self, event: PointerEvent) -> bool:
        return self._controller.handle_event(event)

    # ------------------------------------------------------------------
    # Save / restore
    # ------------------------------------------------------------------
    def save_state(self) -> SavedRangeState:
        return self._model.snapshot()

    def restore_state(self, state: SavedRangeState) -> None:
        self._model.restore(state)
        logger.debug("Restored range state %s", state)
