import json

from trim_range.model.saved_state import SavedRangeState
from trim_range.model.state_store import RangeStateStore


def test_save_writes_json_next_to_media(tmp_path):
    media = tmp_path / "clip.mp4"
    store = RangeStateStore()

    store.save(media, SavedRangeState(0.1, 0.9, 0.12, 0.88))

    payload = json.loads((tmp_path / "clip.mp4.trim.json").read_text(encoding="utf-8"))
    assert payload == {
        "normalized_max": 0.9,
        "normalized_max_time": 0.88,
        "normalized_min": 0.1,
        "normalized_min_time": 0.12,
    }


def test_load_returns_saved_state(tmp_path):
    media = tmp_path / "clip.mp4"
    store = RangeStateStore()
    state = SavedRangeState(0.25, 0.5, 0.2, 0.55)
    store.save(media, state)

    assert store.load(media) == state


def test_load_missing_file_returns_none(tmp_path):
    assert RangeStateStore().load(tmp_path / "clip.mp4") is None


def test_load_corrupt_file_returns_none(tmp_path):
    (tmp_path / "clip.mp4.trim.json").write_text("{not json", encoding="utf-8")

    assert RangeStateStore().load(tmp_path / "clip.mp4") is None


def test_load_incomplete_payload_returns_none(tmp_path):
    (tmp_path / "clip.mp4.trim.json").write_text(
        json.dumps({"normalized_min": 0.1}), encoding="utf-8"
    )

    assert RangeStateStore().load(tmp_path / "clip.mp4") is None


def test_load_non_object_payload_returns_none(tmp_path):
    (tmp_path / "clip.mp4.trim.json").write_text("[0.1, 0.9]", encoding="utf-8")

    assert RangeStateStore().load(tmp_path / "clip.mp4") is None
