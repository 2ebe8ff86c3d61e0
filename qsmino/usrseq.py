"""Expansion of user-entered piece sequences with repeated groups."""

from __future__ import annotations

from enum import IntFlag
from typing import Iterable

PIECE_MASK = 0b11111
"""Bits of a sequence item that hold the piece id."""

PIECE_COUNT = 25
"""Number of distinct piece ids."""

REPEAT_COUNT_MAX = 1023
"""Largest repetition count honoured for a group."""

EXPANSION_LIMIT = 3500
"""Expansion stops once it holds more pieces than this."""


class SequenceFlag(IntFlag):
    """Markers carried by items of a user sequence.

    ``REPEAT_START`` and ``REPEAT_END`` are set on the first and last piece
    of a group; the item after a group's end is its repetition count, or
    exactly ``REPEAT_INF`` for a group that repeats forever.
    """

    NONE = 0
    REPEAT_START = 0x2000
    REPEAT_END = 0x4000
    REPEAT_INF = 0x8000


_START = int(SequenceFlag.REPEAT_START)
_END = int(SequenceFlag.REPEAT_END)
_INF = int(SequenceFlag.REPEAT_INF)


def _is_piece(value: int) -> bool:
    return 0 <= value < PIECE_COUNT


def expand_sequence(seq: Iterable[int]) -> list[int]:
    """Expand groups and repetition counts into a flat list of piece ids.

    A group that repeats forever ends the expansion; it is written out
    once, with ``REPEAT_INF`` set on its first piece.
    """
    items = list(seq)
    n = len(items)
    expanded: list[int] = []
    in_group = False
    group_start = 0

    i = 0
    while i < n and len(expanded) <= EXPANSION_LIMIT:
        value = items[i]
        if in_group:
            if value & _END or i == n - 1:
                in_group = False
                group = [item & PIECE_MASK for item in items[group_start:i + 1]]
                i += 1  # the item after the group is its repetition count
                if i != n and items[i] == _INF:
                    group[0] |= _INF
                    expanded.extend(group)
                    break
                count = 1 if i == n else min(items[i], REPEAT_COUNT_MAX)
                expanded.extend(group * max(count, 0))
        elif value & _START:
            group_start = i
            in_group = True
            if value & _END or i == n - 1:
                # Revisit this item as the end of a one-piece group.
                continue
        else:
            expanded.append(value & PIECE_MASK)
        i += 1

    return expanded


class UserSequence:
    """A user-entered piece sequence that deals pieces by position."""

    def __init__(self, items: Iterable[int]) -> None:
        self.items: tuple[int, ...] = tuple(items)
        self._expanded: list[int] | None = None

    def __len__(self) -> int:
        return len(self.items)

    @property
    def expanded(self) -> list[int]:
        """The expanded sequence, computed once."""
        if self._expanded is None:
            self._expanded = expand_sequence(self.items)
        return self._expanded

    def element(self, index: int) -> int | None:
        """Piece id dealt at a position, or None past the end of the sequence."""
        if index < 0:
            raise ValueError(f"negative sequence index: {index}")
        if not self.items:
            return None

        prefix = self.items[:index]
        if index < len(self.items) and all(_is_piece(v) for v in prefix):
            if _is_piece(self.items[index]):
                return self.items[index]

        expanded = self.expanded
        inf_start = None
        for position, value in enumerate(expanded):
            if value & _INF:
                inf_start = position

        if inf_start is not None:
            if index >= inf_start:
                loop_len = len(expanded) - inf_start
                index = inf_start + ((index - inf_start) % loop_len if loop_len > 1 else 0)
            return expanded[index] & PIECE_MASK

        if index < len(expanded):
            return expanded[index] & PIECE_MASK
        return None