import pytest

from trim_range.model.range_model import RangeModel
from trim_range.model.saved_state import SavedRangeState


def test_new_model_selects_full_range():
    model = RangeModel(0, 64_000, 8_000)

    assert (model.min_value, model.max_value) == (0.0, 1.0)
    assert model.selected_min() == 0.0
    assert model.selected_max() == 64_000.0


def test_set_min_value_cannot_pass_max():
    model = RangeModel(0, 100)
    model.set_max_value(0.4)
    model.set_min_value(0.7)

    assert model.min_value == 0.4
    assert model.max_value == 0.4


def test_setters_clamp_out_of_range_input():
    model = RangeModel(0, 100)
    model.set_min_value(-3.0)
    model.set_max_value(12.0)
    model.set_committed_min(-1.0)
    model.set_committed_max(5.0)

    assert model.min_value == 0.0
    assert model.max_value == 1.0
    assert model.min_value_time == 0.0
    assert model.max_value_time == 1.0


def test_selected_full_bounds_report_exactly():
    total = 187_345.0
    model = RangeModel(0, total, 5_000)
    model.set_selected_min(0)
    model.set_selected_max(total)

    assert model.selected_min() == 0
    assert model.selected_max() == total


@pytest.mark.parametrize("value", [1.0, 999.0, 31_250.5, 63_999.0])
def test_selected_max_round_trip(value):
    model = RangeModel(0, 64_000, 8_000)
    model.set_selected_max(value)

    assert model.selected_max() == pytest.approx(value, abs=1e-6)


def test_selected_values_with_offset_bounds():
    model = RangeModel(1_000, 3_000)
    model.set_selected_min(1_500)
    model.set_selected_max(2_500)

    assert model.min_value == pytest.approx(0.25)
    assert model.max_value == pytest.approx(0.75)
    assert model.selected_min() == pytest.approx(1_500)
    assert model.selected_max() == pytest.approx(2_500)


def test_degenerate_bounds_keep_defaults():
    model = RangeModel(5_000, 5_000)
    model.set_selected_min(1_234)
    model.set_selected_max(9_999)

    assert model.min_value == 0.0
    assert model.max_value == 1.0
    assert model.value_to_normalized(42) == 0.0


def test_absolute_getters_read_committed_values():
    model = RangeModel(0, 1_000)
    model.set_min_value(0.5)

    assert model.selected_min() == 0.0
    model.set_committed_min(0.25)
    assert model.selected_min() == 250.0


def test_is_inert_when_span_not_wider_than_minimum():
    assert RangeModel(0, 4_000, 5_000).is_inert
    assert RangeModel(0, 5_000, 5_000).is_inert
    assert not RangeModel(0, 5_001, 5_000).is_inert


def test_min_gap_rounds_up_for_short_spans():
    model = RangeModel(0, 64_000, 8_000)

    assert model.min_gap_px(213, 10) == 25.0
    assert model.min_gap_px(200, 10) == 23.0


def test_min_gap_keeps_four_decimals_for_long_spans():
    model = RangeModel(0, 640_000, 1_000)

    assert model.min_gap_px(213, 10) == pytest.approx(0.3016)


def test_min_gap_zero_for_degenerate_span():
    assert RangeModel(10, 10, 5).min_gap_px(200, 10) == 0.0


def test_snapshot_and_restore_are_verbatim():
    model = RangeModel(0, 100)
    model.set_selected_min(20)
    model.set_selected_max(80)
    model.set_committed_max(0.7)
    state = model.snapshot()

    other = RangeModel(0, 100)
    other.restore(state)

    assert other.snapshot() == state
    assert other.selected_max() == pytest.approx(70)

    other.restore(SavedRangeState(0.1, 0.2, 0.3, 0.4))
    assert (other.min_value, other.max_value) == (0.1, 0.2)
    assert (other.min_value_time, other.max_value_time) == (0.3, 0.4)


def test_reset_restores_full_selection():
    model = RangeModel(0, 100)
    model.set_selected_min(40)
    model.reset()

    assert model.snapshot() == SavedRangeState()
