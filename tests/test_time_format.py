import pytest

from trim_range.ui.time_format import format_clip_time, format_clip_time_ms


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "00:00"),
        (-5, "00:00"),
        (7, "00:07"),
        (65, "01:05"),
        (3_599, "59:59"),
        (3_600, "01:00:00"),
        (3_725, "01:02:05"),
        (99 * 3_600 + 59 * 60 + 59, "99:59:59"),
        (100 * 3_600, "99:59:59"),
    ],
)
def test_format_clip_time(seconds, expected):
    assert format_clip_time(seconds) == expected


def test_format_clip_time_ms_truncates_to_whole_seconds():
    assert format_clip_time_ms(64_999.0) == "01:04"
    assert format_clip_time_ms(999) == "00:00"
