"""Mapping of coded grid cell values to palette layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class PaletteEntry:
    """One palette mapping: a cell bit and whether it is an overlay flag."""

    mapped_val: int
    is_flag: bool


def palette_layers(value: int, entries: Sequence[PaletteEntry]) -> list[int]:
    """Palette columns to draw for a cell value, bottom layer first.

    Without entries the value itself, less one, picks the column. With
    entries the first one is ignored; the last matching base entry gives
    the bottom layer and every matching flag entry adds an overlay.
    """
    if not entries:
        return [value - 1] if value - 1 >= 0 else []

    layers: list[int] = []
    base = -1
    for index, entry in enumerate(entries[1:], start=1):
        if not value & entry.mapped_val:
            continue
        if entry.is_flag:
            layers.append(index - 1)
        else:
            base = index
    if base >= 0:
        layers.insert(0, base)
    return layers