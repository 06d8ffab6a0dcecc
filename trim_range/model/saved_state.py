"""Serializable snapshot of the range selector values."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Mapping

_FIELDS = (
    "normalized_min",
    "normalized_max",
    "normalized_min_time",
    "normalized_max_time",
)


@dataclass(frozen=True)
class SavedRangeState:
    """The four normalized fields needed to restore a selector.

    Values are stored and restored verbatim; nothing is re-validated against
    the absolute bounds active at restore time.
    """

    normalized_min: float = 0.0
    normalized_max: float = 1.0
    normalized_min_time: float = 0.0
    normalized_max_time: float = 1.0

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "SavedRangeState":
        missing = [name for name in _FIELDS if name not in payload]
        if missing:
            raise ValueError(f"Saved range state is missing: {', '.join(missing)}")
        try:
            values = {name: float(payload[name]) for name in _FIELDS}
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Saved range state has a non-numeric field: {exc}") from exc
        return cls(**values)
