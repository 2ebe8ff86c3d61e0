"""Parser for the piece-sequence text typed into the practice tool."""

from __future__ import annotations

from typing import Callable

from qsmino.usrseq import REPEAT_COUNT_MAX, SequenceFlag

MAX_ITEMS = 3000
"""Largest number of items a parsed sequence may hold."""

Resolver = Callable[[str], "int | None"]

_START = int(SequenceFlag.REPEAT_START)
_END = int(SequenceFlag.REPEAT_END)
_INF = int(SequenceFlag.REPEAT_INF)

_MAX_COUNT_DIGITS = 4


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _resolve_piece(text: str, pos: int, resolve: Resolver) -> int | None:
    """Resolve the piece named at a position, trying "X4", then "X", then "Xa"/"Xb"."""
    letter = text[pos]
    following = text[pos + 1] if pos + 1 < len(text) else ""
    candidates = []
    if following == "4":
        candidates.append(letter + "4")
    candidates.append(letter)
    if following in ("a", "b"):
        candidates.append(letter + following)
    for name in candidates:
        piece = resolve(name)
        if piece is not None:
            return piece
    return None


class _Sequence(list):
    def append(self, value: int) -> None:
        if len(self) >= MAX_ITEMS:
            raise ValueError(f"piece sequence longer than {MAX_ITEMS} items")
        super().append(value)


def parse_sequence(text: str, resolve: Resolver) -> list[int]:
    """Turn sequence text into items with repeat markers.

    Upper-case letters name pieces and are looked up with ``resolve``,
    which returns a piece id or None when the name is not a usable piece.
    ``(...)`` groups pieces, ``*`` after a piece or group starts a
    repetition count, and ``*INF`` makes the group repeat forever.
    Anything else is ignored.
    """
    seq = _Sequence()
    group_start_pending = False
    in_group = False
    want_count = False
    pending_count = False

    pos = 0
    length = len(text)
    while pos < length:
        ch = text[pos]

        if not _is_upper(ch) and ch not in "*()":
            if want_count:
                digits = ""
                while len(digits) < _MAX_COUNT_DIGITS and pos < length and _is_digit(text[pos]):
                    digits += text[pos]
                    pos += 1
                # Step back so the loop resumes at the first unread character.
                seq.append(int(digits) & REPEAT_COUNT_MAX if digits else 1)
                want_count = False
                continue
            pos += 1
            continue

        if want_count:
            if pos < length - 1 and text[pos:pos + 3] == "INF":
                seq.append(_INF)
                return list(seq)
            seq.append(1)
            want_count = False
            pos += 1
            continue

        if ch == "*":
            if in_group:
                if not group_start_pending:
                    want_count = True
                    pending_count = False
                    in_group = False
                    seq[-1] |= _END
            elif len(seq) > 1:
                if not seq[-2] & _END:
                    want_count = True
                    pending_count = False
                    if not seq[-1] & _END:
                        seq[-1] |= _END | _START
            elif seq:
                seq[0] |= _START | _END
                want_count = True
                pending_count = False
            pos += 1
            continue

        if ch == "(":
            if not in_group:
                group_start_pending = True
                in_group = True
            pos += 1
            continue

        if ch == ")":
            if in_group and seq:
                seq[-1] |= _END
                pending_count = True
            pos += 1
            continue

        if pending_count:
            # A group closed without "*" repeats once; reread this letter.
            seq.append(1)
            pending_count = False
            continue

        piece = _resolve_piece(text, pos, resolve)
        if piece is not None:
            if group_start_pending:
                piece |= _START
                group_start_pending = False
            seq.append(piece)
        pos += 1

    if want_count:
        seq.append(1)

    return list(seq)