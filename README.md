# qsmino

Game-rule pieces for a falling-block puzzle game with pentomino and
tetromino modes. The package holds logic that does not depend on rendering
or audio: grade tables and grade-point arithmetic, the practice tool's user
piece sequences, and the mapping of coded grid cells to palette tiles.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `qsmino.grades`

- `Grade` – displayed grades from `G9` up to `GM`; `InternalGrade` – the
  hidden grades (`G9` … `S9`) used by grade points.
- `GREEN_LINE`, `ORANGE_LINE` – bits that may be or-ed onto a grade.
- `grade_name(grade)` – three-character label; line bits are ignored and
  out-of-range grades give `" --"`.
- `internal_grade_name(index)` – label of an internal grade, or `"N/A"`.
- `internal_to_displayed_grade(internal_grade)` – displayed grade for an
  internal one (`-1` for negative input).
- `SCORE_REQUIREMENTS`, `grade_for_score(score)` – highest grade a score
  reaches; `crossed_grade(old_score, new_score)` – highest grade whose
  requirement was passed between two scores, or `None`.
- `grade_points_for_clear(internal_grade, lines, combo, level)` – grade
  points earned by a line clear (single-precision combo multipliers, with a
  bonus every 250 levels); `grade_point_decay(internal_grade)` – frames
  between losing one point. Both raise `ValueError` for out-of-range input.

### `qsmino.seqparse`

`parse_sequence(text, resolve)` reads the text typed into the practice
tool. Upper-case letters name pieces and are looked up with `resolve`,
which returns a piece id or `None`. `(...)` groups pieces, `*` after a
piece or group is followed by a repetition count (up to four digits), and
`*INF` repeats the group forever. Other characters are ignored. More than
`MAX_ITEMS` items raises `ValueError`.

### `qsmino.usrseq`

- `SequenceFlag` – `REPEAT_START`, `REPEAT_END` and `REPEAT_INF` markers.
- `expand_sequence(seq)` – flattens groups and counts into piece ids;
  counts are capped at `REPEAT_COUNT_MAX`, expansion stops past
  `EXPANSION_LIMIT`, and an infinite group is written once with
  `REPEAT_INF` on its first piece.
- `UserSequence(items)` – `element(index)` gives the piece dealt at a
  position, looping infinite groups, or `None` past the end.

### `qsmino.palette`

`PaletteEntry(mapped_val, is_flag)` and `palette_layers(value, entries)`,
which lists the palette columns to draw for a cell value, bottom layer
first.

## Example

```python
from qsmino.grades import grade_for_score, grade_name
from qsmino.seqparse import parse_sequence
from qsmino.usrseq import UserSequence, expand_sequence

print(grade_name(grade_for_score(16000)))        # " S1"

items = parse_sequence("(IT)*3", {"I": 0, "T": 1}.get)
print(expand_sequence(items))                     # [0, 1, 0, 1, 0, 1]
print(UserSequence(items).element(3))             # 1
```

## What the package does not do

There is no game loop, mode setup, speed curve, music selection, scoring
formula, rendering, sound or command-line program here. The package only
supplies the tables and rules listed above for a game to use.