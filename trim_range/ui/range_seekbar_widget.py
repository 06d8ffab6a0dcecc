"""PyQt5 host for the range selector core."""
from __future__ import annotations

import logging
from typing import Sequence

from PyQt5 import QtCore, QtGui, QtWidgets

from trim_range.config import RangeSeekBarConfig
from trim_range.geometry.mapping import TrackLayout
from trim_range.interaction import HostCallbacks, RangeEventKind
from trim_range.interaction.events import Pointer, PointerAction, PointerEvent
from trim_range.model.touch_session import Handle
from trim_range.range_seekbar import RangeSeekBar
from trim_range.ui.time_format import format_clip_time_ms

logger = logging.getLogger(__name__)

_TOUCH_EVENT_TYPES = {
    QtCore.QEvent.TouchBegin,
    QtCore.QEvent.TouchUpdate,
    QtCore.QEvent.TouchEnd,
    QtCore.QEvent.TouchCancel,
}


def translate_touch(
    event_type: QtCore.QEvent.Type,
    points: Sequence[tuple[int, float, QtCore.Qt.TouchPointState]],
) -> PointerEvent:
    """Map a Qt touch event type and its ``(id, x, state)`` points to a
    :class:`PointerEvent`.

    Within a ``TouchUpdate`` the first newly pressed or released point turns
    the event into a secondary pointer down or up at that point's index.
    """

    pointers = tuple(Pointer(point_id, x) for point_id, x, _state in points)
    if event_type == QtCore.QEvent.TouchCancel:
        return PointerEvent(PointerAction.CANCEL, pointers)
    if event_type == QtCore.QEvent.TouchBegin:
        return PointerEvent(PointerAction.DOWN, pointers)
    if event_type == QtCore.QEvent.TouchEnd:
        return PointerEvent(PointerAction.UP, pointers)
    for index, (_point_id, _x, state) in enumerate(points):
        if state == QtCore.Qt.TouchPointPressed:
            return PointerEvent(PointerAction.POINTER_DOWN, pointers, index)
        if state == QtCore.Qt.TouchPointReleased:
            return PointerEvent(PointerAction.POINTER_UP, pointers, index)
    return PointerEvent(PointerAction.MOVE, pointers)


class RangeSeekBarWidget(QtWidgets.QWidget):
    """Draws the trim window and forwards mouse and touch input to the core."""

    rangeChanged = QtCore.pyqtSignal(float, float, str, bool, str)
    dragCancelled = QtCore.pyqtSignal()

    BORDER_THICKNESS = 2
    TEXT_AREA_HEIGHT = 20
    TEXT_MARGIN = 5
    PADDING_TOP = 10

    def __init__(
        self,
        config: RangeSeekBarConfig | None = None,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or RangeSeekBarConfig()
        self._start_ms = 0.0
        self._end_ms = 0.0
        self._seekbar = RangeSeekBar(
            self._track_layout,
            self._config,
            callbacks=HostCallbacks(
                claim_drag=self._claim_drag,
                pressed_changed=self._on_pressed_changed,
                drag_cancelled=self._on_drag_cancelled,
                request_redraw=self.update,
            ),
            listener=self._on_range_changed,
        )
        self.setFocusPolicy(QtCore.Qt.StrongFocus)
        self.setAttribute(QtCore.Qt.WA_AcceptTouchEvents, True)
        self.setMinimumHeight(60)

    @property
    def seekbar(self) -> RangeSeekBar:
        return self._seekbar

    def sizeHint(self) -> QtCore.QSize:
        return QtCore.QSize(300, 120)

    def set_start_end_time(self, start_ms: float, end_ms: float) -> None:
        """Set the labels drawn under the handles. Display only."""
        self._start_ms = start_ms
        self._end_ms = end_ms
        self.update()

    def set_touch_locked(self, locked: bool) -> None:
        self._seekbar.set_touch_locked(locked)

    def changeEvent(self, event: QtCore.QEvent) -> None:
        if event.type() == QtCore.QEvent.EnabledChange:
            self._seekbar.set_enabled(self.isEnabled())
        super().changeEvent(event)

    # ------------------------------------------------------------------
    # Core wiring
    # ------------------------------------------------------------------
    def _track_layout(self) -> TrackLayout:
        margins = self.contentsMargins()
        return TrackLayout(
            width=float(self.width()),
            handle_width=self._config.handle_width,
            padding_left=margins.left() + self._config.padding_left,
            padding_right=margins.right() + self._config.padding_right,
        )

    def _claim_drag(self) -> None:
        self.setCursor(QtCore.Qt.ClosedHandCursor)

    def _on_pressed_changed(self, pressed: bool) -> None:
        if not pressed:
            self.unsetCursor()
        self.update()

    def _on_drag_cancelled(self) -> None:
        self.unsetCursor()
        self.dragCancelled.emit()

    def _on_range_changed(
        self,
        selected_min: float,
        selected_max: float,
        kind: RangeEventKind,
        collapsed: bool,
        pressed_handle: Handle | None,
    ) -> None:
        handle_name = pressed_handle.value if pressed_handle is not None else ""
        self.rangeChanged.emit(
            selected_min, selected_max, kind.value, collapsed, handle_name
        )

    # ------------------------------------------------------------------
    # Input translation
    # ------------------------------------------------------------------
    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:
        if event.button() == QtCore.Qt.LeftButton and self._dispatch(
            PointerEvent.single(PointerAction.DOWN, event.localPos().x())
        ):
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QtGui.QMouseEvent) -> None:
        if event.buttons() & QtCore.Qt.LeftButton and self._dispatch(
            PointerEvent.single(PointerAction.MOVE, event.localPos().x())
        ):
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent) -> None:
        if event.button() == QtCore.Qt.LeftButton and self._dispatch(
            PointerEvent.single(PointerAction.UP, event.localPos().x())
        ):
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def event(self, event: QtCore.QEvent) -> bool:
        if event.type() in _TOUCH_EVENT_TYPES:
            pointer_event = self._translate_touch(event)
            if self._dispatch(pointer_event):
                event.accept()
                return True
        return super().event(event)

    def _translate_touch(self, event: QtGui.QTouchEvent) -> PointerEvent:
        return translate_touch(
            event.type(),
            [(point.id(), point.pos().x(), point.state()) for point in event.touchPoints()],
        )

    def _dispatch(self, pointer_event: PointerEvent) -> bool:
        handled = self._seekbar.on_touch_event(pointer_event)
        logger.debug("%s handled=%s", pointer_event.action.value, handled)
        return handled

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------
    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.Antialiasing)

        handle_width = self._config.handle_width
        half_width = handle_width / 2.0
        range_left = self._seekbar.min_handle_x
        range_right = self._seekbar.max_handle_x
        height = self.height()
        right_bound = self.width() - self.contentsMargins().right()

        shadow = QtGui.QColor(0, 0, 0, 0xAA)
        painter.fillRect(QtCore.QRectF(0, 0, range_left, height), shadow)
        painter.fillRect(
            QtCore.QRectF(range_right, 0, right_bound - range_right, height), shadow
        )

        border = QtGui.QColor(QtCore.Qt.white)
        border_width = range_right - range_left - handle_width
        if border_width > 0:
            painter.fillRect(
                QtCore.QRectF(
                    range_left + half_width,
                    self.PADDING_TOP,
                    border_width,
                    self.BORDER_THICKNESS,
                ),
                border,
            )
            bottom_top = height - self.BORDER_THICKNESS - self.TEXT_AREA_HEIGHT
            painter.fillRect(
                QtCore.QRectF(
                    range_left + half_width,
                    bottom_top,
                    border_width,
                    self.BORDER_THICKNESS,
                ),
                border,
            )

        pressed = self._seekbar.pressed_handle
        self._draw_handle(painter, range_left, pressed is Handle.MIN, is_left=True)
        self._draw_handle(painter, range_right, pressed is Handle.MAX, is_left=False)
        self._draw_time_text(painter, range_left, range_right)
        painter.end()

    def _draw_handle(
        self, painter: QtGui.QPainter, x: float, pressed: bool, is_left: bool
    ) -> None:
        handle_width = self._config.handle_width
        left = x if is_left else x - handle_width
        handle_height = self.height() - self.PADDING_TOP - self.TEXT_AREA_HEIGHT
        color = QtGui.QColor("#ffd54f") if pressed else QtGui.QColor(QtCore.Qt.white)
        painter.fillRect(
            QtCore.QRectF(left, self.PADDING_TOP, handle_width, handle_height), color
        )

    def _draw_time_text(
        self, painter: QtGui.QPainter, range_left: float, range_right: float
    ) -> None:
        left_text = format_clip_time_ms(self._start_ms)
        right_text = format_clip_time_ms(self._end_ms)
        metrics = painter.fontMetrics()
        left_width = metrics.horizontalAdvance(left_text)
        right_width = metrics.horizontalAdvance(right_text)
        text_y = self.height() - self.TEXT_MARGIN

        left_x = range_left
        if left_x + left_width > self.width():
            left_x = self.width() - left_width - self.TEXT_MARGIN
        right_x = range_right
        if right_x - right_width < 0:
            right_x = right_width + self.TEXT_MARGIN

        painter.setPen(QtGui.QPen(QtCore.Qt.white))
        painter.drawText(QtCore.QPointF(left_x, text_y), left_text)
        painter.drawText(QtCore.QPointF(right_x - right_width, text_y), right_text)
