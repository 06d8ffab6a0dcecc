"""Pointer-driven drag state machine for the two range handles."""
from __future__ import annotations

import logging
from typing import Callable

from trim_range.geometry.mapping import TrackLayout
from trim_range.interaction import HostCallbacks, RangeEventKind
from trim_range.interaction.events import PointerAction, PointerEvent
from trim_range.interaction.hit_testing import ThumbHitTester
from trim_range.interaction.notifier import ChangeNotifier
from trim_range.interaction.value_resolver import (
    DEFAULT_EDGE_SNAP_FRACTION,
    DEFAULT_SNAP_TOLERANCE_SCALE,
    resolve_handle_move,
)
from trim_range.model.range_model import RangeModel
from trim_range.model.touch_session import Handle, TouchSession

DEFAULT_TOUCH_SLOP = 8.0

logger = logging.getLogger(__name__)


class DragController:
    """Consumes pointer events and drives :class:`RangeModel` updates.

    One pointer is authoritative at a time. Pressing a handle starts tracking
    on the same event, so the touch slop only applies when tracking was not
    started at press time.
    """

    def __init__(
        self,
        model: RangeModel,
        layout_provider: Callable[[], TrackLayout],
        notifier: ChangeNotifier,
        callbacks: HostCallbacks | None = None,
        hit_tester: ThumbHitTester | None = None,
        touch_slop: float = DEFAULT_TOUCH_SLOP,
        snap_tolerance_scale: float = DEFAULT_SNAP_TOLERANCE_SCALE,
        edge_snap_fraction: float = DEFAULT_EDGE_SNAP_FRACTION,
        notify_while_dragging: bool = False,
    ) -> None:
        self._model = model
        self._layout_provider = layout_provider
        self._notifier = notifier
        self._callbacks = callbacks or HostCallbacks()
        self._hit_tester = hit_tester or ThumbHitTester()
        self._session = TouchSession()
        self.touch_slop = touch_slop
        self.snap_tolerance_scale = snap_tolerance_scale
        self.edge_snap_fraction = edge_snap_fraction
        self.notify_while_dragging = notify_while_dragging
        self.enabled = True
        self.touch_locked = False

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------
    @property
    def session(self) -> TouchSession:
        return self._session

    @property
    def is_dragging(self) -> bool:
        return self._session.is_dragging

    @property
    def pressed_handle(self) -> Handle | None:
        return self._session.pressed_handle

    @property
    def hit_tester(self) -> ThumbHitTester:
        return self._hit_tester

    def reset(self) -> None:
        self._session.reset()

    # ------------------------------------------------------------------
    # Event entry point
    # ------------------------------------------------------------------
    def handle_event(self, event: PointerEvent) -> bool:
        """Process ``event``; return True when it was consumed."""

        if self.touch_locked or not self.enabled:
            return False
        if not event.pointers and event.action is not PointerAction.CANCEL:
            return False
        if event.pointer_count > 1 and not self._session.is_dragging:
            return False
        if self._model.is_inert:
            return False

        action = event.action
        if action is PointerAction.DOWN:
            return self._handle_down(event)
        if action is PointerAction.MOVE:
            return self._handle_move(event)
        if action is PointerAction.UP:
            return self._handle_up(event)
        if action is PointerAction.POINTER_DOWN:
            return self._handle_pointer_down(event)
        if action is PointerAction.POINTER_UP:
            return self._handle_pointer_up(event)
        if action is PointerAction.CANCEL:
            return self._handle_cancel()
        return False

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def _handle_down(self, event: PointerEvent) -> bool:
        pointer = event.pointers[-1]
        self._session.anchor(pointer.pointer_id, pointer.x)
        self._session.collapsed = False
        layout = self._layout_provider()
        pressed = self._hit_tester.hit_test(
            pointer.x,
            layout.to_screen(self._model.min_value),
            layout.to_screen(self._model.max_value),
            layout.handle_half_width,
            layout.width,
        )
        self._session.pressed_handle = pressed
        logger.debug("Press at x=%s resolved to handle=%s", pointer.x, pressed)
        if pressed is None:
            if self._session.is_dragging:
                self._stop_tracking()
            self._set_pressed(False)
            return False

        self._set_pressed(True)
        self._start_tracking()
        self._track(event)
        self._callbacks.claim_drag()
        self._notify(RangeEventKind.PRESS)
        return True

    def _handle_move(self, event: PointerEvent) -> bool:
        if self._session.pressed_handle is None:
            return False

        tracked = False
        if self._session.is_dragging:
            tracked = self._track(event)
        else:
            x = event.x_for(self._session.active_pointer_id)
            if x is not None and abs(x - self._session.down_x) > self.touch_slop:
                self._set_pressed(True)
                self._start_tracking()
                tracked = self._track(event)
                self._callbacks.claim_drag()

        if tracked and self.notify_while_dragging:
            self._notify(RangeEventKind.MOVE)
        return True

    def _handle_up(self, event: PointerEvent) -> bool:
        if self._session.pressed_handle is None:
            self._session.reset()
            return False

        if not self._session.is_dragging:
            # A tap on a handle still snaps it to the tap position.
            self._start_tracking()
        self._track(event)
        self._stop_tracking()
        self._set_pressed(False)

        self._notify(RangeEventKind.RELEASE)
        self._session.reset()
        self._callbacks.request_redraw()
        return True

    def _handle_pointer_down(self, event: PointerEvent) -> bool:
        index = event.action_index
        if index is None or not 0 <= index < event.pointer_count:
            index = event.pointer_count - 1
        pointer = event.pointers[index]
        self._session.anchor(pointer.pointer_id, pointer.x)
        logger.debug("Pointer %s became active at x=%s", pointer.pointer_id, pointer.x)
        self._callbacks.request_redraw()
        return True

    def _handle_pointer_up(self, event: PointerEvent) -> bool:
        index = event.action_index
        if index is None or not 0 <= index < event.pointer_count:
            logger.debug("Pointer up without a resolvable index: %s", index)
            return True
        released = event.pointers[index]
        if released.pointer_id == self._session.active_pointer_id:
            replacement = 1 if index == 0 else 0
            if replacement < event.pointer_count:
                pointer = event.pointers[replacement]
                self._session.anchor(pointer.pointer_id, pointer.x)
                logger.debug(
                    "Active pointer %s lifted; re-anchored to %s",
                    released.pointer_id,
                    pointer.pointer_id,
                )
        self._callbacks.request_redraw()
        return True

    def _handle_cancel(self) -> bool:
        if self._session.is_dragging:
            self._stop_tracking()
            self._set_pressed(False)
        self._session.reset()
        self._callbacks.drag_cancelled()
        self._callbacks.request_redraw()
        return True

    # ------------------------------------------------------------------
    # Tracking
    # ------------------------------------------------------------------
    def _start_tracking(self) -> None:
        self._session.is_dragging = True

    def _stop_tracking(self) -> None:
        self._session.is_dragging = False

    def _set_pressed(self, pressed: bool) -> None:
        if self._session.is_pressed == pressed:
            return
        self._session.is_pressed = pressed
        self._callbacks.pressed_changed(pressed)

    def _track(self, event: PointerEvent) -> bool:
        handle = self._session.pressed_handle
        if handle is None:
            return False
        x = event.x_for(self._session.active_pointer_id)
        if x is None:
            logger.debug(
                "Active pointer %s missing from event; update skipped",
                self._session.active_pointer_id,
            )
            return False

        move = resolve_handle_move(
            handle,
            x,
            self._model,
            self._layout_provider(),
            snap_tolerance_scale=self.snap_tolerance_scale,
            edge_snap_fraction=self.edge_snap_fraction,
        )
        if handle is Handle.MIN:
            self._model.set_min_value(move.value)
            self._model.set_committed_min(move.time_value)
        else:
            self._model.set_max_value(move.value)
            self._model.set_committed_max(move.time_value)
        self._session.collapsed = move.collapsed
        self._callbacks.request_redraw()
        return True

    def _notify(self, kind: RangeEventKind) -> None:
        self._notifier.notify(
            self._model.selected_min(),
            self._model.selected_max(),
            kind,
            self._session.collapsed,
            self._session.pressed_handle,
        )
