"""Standalone demo window for the trim range selector."""
from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
import sys
from typing import Optional

from PyQt5 import QtWidgets

from trim_range import config as range_config
from trim_range.model import RangeStateStore
from trim_range.ui.range_seekbar_widget import RangeSeekBarWidget

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    base_dir = os.path.dirname(sys.argv[0])
    log_path = os.path.join(base_dir, "trim_range_log.txt")

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="a", encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
    )


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Trim range selector demo")
    parser.add_argument(
        "duration_ms",
        nargs="?",
        type=float,
        default=None,
        help="Media duration in milliseconds (defaults to the configured bounds)",
    )
    parser.add_argument(
        "--media",
        type=Path,
        default=None,
        help="Media file whose trim range is restored on start and saved on release",
    )
    return parser.parse_args(argv)


def prepare_config(
    main_script_path: Optional[Path], duration_ms: Optional[float]
) -> range_config.RangeSeekBarConfig:
    """Load the settings file, writing it back so the defaults become editable."""

    config = range_config.load_config(main_script_path)
    range_config.save_config(config, main_script_path)
    if duration_ms is not None:
        config.bounds_max = config.bounds_min + duration_ms
    return config


def attach_state_store(
    seekbar: RangeSeekBarWidget, media_path: Path, store: RangeStateStore
) -> None:
    """Restore the saved range for ``media_path`` and save it on every release."""

    state = store.load(media_path)
    if state is not None:
        seekbar.seekbar.restore_state(state)
        logger.info("Restored trim range for %s", media_path)

    def _save_on_release(_start, _end, kind, _collapsed, _handle):
        if kind == "release":
            store.save(media_path, seekbar.seekbar.save_state())

    seekbar.rangeChanged.connect(_save_on_release)


def build_window(
    config: range_config.RangeSeekBarConfig,
    media_path: Optional[Path] = None,
    store: Optional[RangeStateStore] = None,
) -> QtWidgets.QWidget:
    window = QtWidgets.QWidget()
    window.setWindowTitle("Trim Range")
    layout = QtWidgets.QVBoxLayout(window)
    status = QtWidgets.QLabel()
    seekbar = RangeSeekBarWidget(config)
    seekbar.set_start_end_time(config.bounds_min, config.bounds_max)

    def _on_range_changed(start, end, kind, collapsed, handle):
        seekbar.set_start_end_time(start, end)
        suffix = " (minimum span)" if collapsed else ""
        status.setText(f"{kind}: {start:.0f} ms - {end:.0f} ms{suffix}")

    seekbar.rangeChanged.connect(_on_range_changed)
    if media_path is not None:
        attach_state_store(seekbar, media_path, store or RangeStateStore())
        seekbar.set_start_end_time(
            seekbar.seekbar.selected_min(), seekbar.seekbar.selected_max()
        )
    layout.addWidget(seekbar)
    layout.addWidget(status)
    return window


def main() -> None:
    configure_logging()
    args = _parse_args(sys.argv[1:])
    main_script_path = Path(__file__).resolve()
    config = prepare_config(main_script_path, args.duration_ms)
    logger.info(
        "Starting trim range demo: bounds=%s..%s minimum_span=%s",
        config.bounds_min,
        config.bounds_max,
        config.minimum_span,
    )

    app = QtWidgets.QApplication(sys.argv)
    window = build_window(config, args.media)
    window.resize(480, 160)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
