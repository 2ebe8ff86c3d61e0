from qsmino.palette import PaletteEntry, palette_layers

ENTRIES = [
    PaletteEntry(0, False),
    PaletteEntry(0x1, False),
    PaletteEntry(0x2, False),
    PaletteEntry(0x100, True),
]


def test_plain_values():
    assert palette_layers(3, []) == [2]
    assert palette_layers(0, []) == []
    assert palette_layers(-4, []) == []


def test_base_and_flag():
    assert palette_layers(0x101, ENTRIES) == [1, 2]


def test_no_match():
    assert palette_layers(0x40, ENTRIES) == []


def test_last_base_wins_and_comes_first():
    layers = palette_layers(0x103, ENTRIES)
    assert layers[0] == 2
    assert len(layers) == 2


def test_first_entry_ignored():
    entries = [PaletteEntry(0xFF, False)]
    assert palette_layers(0xFF, entries) == []