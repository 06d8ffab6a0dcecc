"""Platform-neutral pointer events consumed by the drag controller."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class PointerAction(Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    POINTER_DOWN = "pointer_down"
    POINTER_UP = "pointer_up"
    CANCEL = "cancel"


@dataclass(frozen=True)
class Pointer:
    pointer_id: int
    x: float


@dataclass(frozen=True)
class PointerEvent:
    """A pointer event carrying every pointer currently on the surface.

    ``action_index`` is the index into ``pointers`` of the pointer that went
    down or up for ``POINTER_DOWN``/``POINTER_UP``; it is ignored otherwise.
    """

    action: PointerAction
    pointers: tuple[Pointer, ...]
    action_index: int | None = None

    @classmethod
    def single(
        cls, action: PointerAction, x: float, pointer_id: int = 0
    ) -> "PointerEvent":
        return cls(action, (Pointer(pointer_id, x),))

    @classmethod
    def of(
        cls,
        action: PointerAction,
        pointers: Sequence[tuple[int, float]],
        action_index: int | None = None,
    ) -> "PointerEvent":
        return cls(
            action,
            tuple(Pointer(pointer_id, x) for pointer_id, x in pointers),
            action_index,
        )

    @property
    def pointer_count(self) -> int:
        return len(self.pointers)

    def find_pointer_index(self, pointer_id: int | None) -> int | None:
        if pointer_id is None:
            return None
        for index, pointer in enumerate(self.pointers):
            if pointer.pointer_id == pointer_id:
                return index
        return None

    def x_for(self, pointer_id: int | None) -> float | None:
        index = self.find_pointer_index(pointer_id)
        if index is None:
            return None
        return self.pointers[index].x
