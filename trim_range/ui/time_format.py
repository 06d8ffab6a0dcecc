from __future__ import annotations

MAX_DISPLAY_HOURS = 99
SECONDS_PER_HOUR = 3600


def format_clip_time(seconds: int) -> str:
    """Format whole seconds as ``MM:SS``, or ``HH:MM:SS`` from one hour up."""

    seconds = int(seconds)
    if seconds <= 0:
        return "00:00"
    hours = seconds // SECONDS_PER_HOUR
    minutes = (seconds % SECONDS_PER_HOUR) // 60
    secs = seconds % 60
    if hours > MAX_DISPLAY_HOURS:
        return "99:59:59"
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def format_clip_time_ms(milliseconds: float) -> str:
    return format_clip_time(int(milliseconds // 1000))
