import os
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

try:  # pragma: no cover - allows tests to be skipped in headless CI without PyQt5
    from PyQt5 import QtCore, QtGui, QtWidgets
    from trim_range import main as demo
    from trim_range.config import CONFIG_FILENAME, RangeSeekBarConfig, load_config
    from trim_range.model import RangeStateStore, SavedRangeState
    from trim_range.ui.range_seekbar_widget import RangeSeekBarWidget
except ImportError:  # pragma: no cover
    pytest.skip("PyQt5 not available", allow_module_level=True)


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app


def _mouse(event_type, x: float, buttons=QtCore.Qt.LeftButton):
    return QtGui.QMouseEvent(
        event_type, QtCore.QPointF(x, 60.0), QtCore.Qt.LeftButton, buttons, QtCore.Qt.NoModifier
    )


def test_prepare_config_writes_settings_without_duration(tmp_path):
    main_script = tmp_path / "main.py"

    config = demo.prepare_config(main_script, 10_000.0)

    assert (tmp_path / CONFIG_FILENAME).exists()
    assert config.bounds_max == 10_000.0
    assert load_config(main_script).bounds_max == RangeSeekBarConfig().bounds_max


def test_media_state_restored_and_saved_on_release(qapp, tmp_path):
    media = tmp_path / "clip.mp4"
    store = RangeStateStore()
    store.save(media, SavedRangeState(0.25, 0.5, 0.25, 0.5))
    widget = RangeSeekBarWidget(
        RangeSeekBarConfig(bounds_max=64_000.0, minimum_span=8_000.0, handle_width=10.0)
    )
    widget.resize(200, 120)

    demo.attach_state_store(widget, media, store)

    assert widget.seekbar.selected_min() == pytest.approx(16_000)
    widget.mousePressEvent(_mouse(QtCore.QEvent.MouseButtonPress, 50.0))
    widget.mouseMoveEvent(_mouse(QtCore.QEvent.MouseMove, 30.0))
    widget.mouseReleaseEvent(
        _mouse(QtCore.QEvent.MouseButtonRelease, 30.0, buttons=QtCore.Qt.NoButton)
    )

    saved = store.load(media)
    assert saved is not None
    assert saved.normalized_min_time == pytest.approx(30 / 180)
    assert saved.normalized_max_time == 0.5


def test_build_window_without_media(qapp):
    window = demo.build_window(RangeSeekBarConfig())

    assert window.findChild(RangeSeekBarWidget) is not None
