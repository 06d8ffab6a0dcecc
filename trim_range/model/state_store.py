from __future__ import annotations

import json
import logging
from pathlib import Path

from trim_range.model.saved_state import SavedRangeState

logger = logging.getLogger(__name__)


class RangeStateStore:
    """Persists the selector state to a JSON file next to the media file."""

    def _state_path(self, media_path: Path) -> Path:
        return media_path.with_name(media_path.name + ".trim.json")

    def load(self, media_path: Path) -> SavedRangeState | None:
        path = self._state_path(media_path)
        if not path.exists():
            return None
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.warning("Could not read saved range from %s", path)
            return None
        if not isinstance(payload, dict):
            return None
        try:
            return SavedRangeState.from_dict(payload)
        except ValueError:
            logger.warning("Ignoring malformed saved range in %s", path)
            return None

    def save(self, media_path: Path, state: SavedRangeState) -> None:
        path = self._state_path(media_path)
        path.write_text(
            json.dumps(state.to_dict(), indent=2, sort_keys=True), encoding="utf-8"
        )
        logger.info("Saved range state to %s", path)
