"""Grade tables, grade names and grade-point arithmetic."""

from __future__ import annotations

import math
import struct
from enum import IntEnum

GREEN_LINE = 0x100
ORANGE_LINE = 0x200


class Grade(IntEnum):
    """Displayed grades, from 9 up to GM."""

    G9 = 0
    G8 = 1
    G7 = 2
    G6 = 3
    G5 = 4
    G4 = 5
    G3 = 6
    G2 = 7
    G1 = 8
    S1 = 9
    S2 = 10
    S3 = 11
    S4 = 12
    S5 = 13
    S6 = 14
    S7 = 15
    S8 = 16
    S9 = 17
    S10 = 18
    S11 = 19
    S12 = 20
    S13 = 21
    M1 = 22
    M2 = 23
    M3 = 24
    M4 = 25
    M5 = 26
    M6 = 27
    M7 = 28
    M8 = 29
    M9 = 30
    M = 31
    MK = 32
    MV = 33
    MO = 34
    MM = 35
    GM = 36


class InternalGrade(IntEnum):
    """Hidden grades that drive the displayed grade in G2 master mode."""

    G9 = 0
    G8 = 1
    G7 = 2
    G6 = 3
    G5 = 4
    G4 = 5
    G4_PLUS = 6
    G3 = 7
    G3_PLUS = 8
    G2_MINUS = 9
    G2 = 10
    G2_PLUS = 11
    G1_MINUS = 12
    G1 = 13
    G1_PLUS = 14
    S1_MINUS = 15
    S1 = 16
    S1_PLUS = 17
    S2 = 18
    S3 = 19
    S4_MINUS = 20
    S4 = 21
    S4_PLUS = 22
    S5 = 23
    S5_PLUS = 24
    S6 = 25
    S6_PLUS = 26
    S7 = 27
    S7_PLUS = 28
    S8 = 29
    S8_PLUS = 30
    S9 = 31


_GRADE_NAMES = (
    "  9", "  8", "  7", "  6", "  5", "  4", "  3", "  2", "  1",
    " S1", " S2", " S3", " S4", " S5", " S6", " S7", " S8", " S9",
    "S10", "S11", "S12", "S13",
    " m1", " m2", " m3", " m4", " m5", " m6", " m7", " m8", " m9",
    "  M", " MK", " MV", " MO", " MM", " GM",
)

_INTERNAL_GRADE_NAMES = (
    " 9 ", " 8 ", " 7 ", " 6 ", " 5 ", " 4 ", " 4+", " 3 ", " 3+",
    " 2-", " 2 ", " 2+", " 1-", " 1 ", " 1+", "S1-", "S1 ", "S1+",
    "S2 ", "S3 ", "S4-", "S4 ", "S5 ", "S5+", "S6 ", "S6+", "S7 ", "S7+", "S8 ", "S8+", "S9 ",
)

SCORE_REQUIREMENTS = (
    400, 800, 1400, 2000, 3500, 5500, 8000, 12000,
    16000, 22000, 30000, 40000, 52000, 66000, 82000, 100000, 120000,
)
"""Scores needed for grades 8 through S9."""

_GRADE_POINTS = (
    (10, 20, 40, 50),
    (10, 20, 30, 40),
    (10, 20, 30, 40),
    (10, 15, 30, 40),
    (10, 15, 20, 40),
    (5, 15, 20, 30),
    (5, 10, 20, 30),
    (5, 10, 15, 30),
    (5, 10, 15, 30),
    (5, 10, 15, 30),
) + ((2, 12, 13, 30),) * 22

_GRADE_POINT_DECAYS = (
    125, 80, 80, 50, 45, 45, 45, 40, 40, 40, 40, 40, 30, 30, 30,
    20, 20, 20, 20, 20, 15, 15, 15, 15, 15, 15, 15, 15, 15, 15, 10, 10,
)

_COMBO_MULTIPLIERS = (
    (1.0, 1.0, 1.0, 1.0),
    (1.2, 1.4, 1.5, 1.0),
    (1.2, 1.5, 1.8, 1.0),
    (1.4, 1.6, 2.0, 1.0),
    (1.4, 1.7, 2.2, 1.0),
    (1.4, 1.8, 2.3, 1.0),
    (1.4, 1.9, 2.4, 1.0),
    (1.5, 2.0, 2.5, 1.0),
    (1.5, 2.1, 2.6, 1.0),
    (2.0, 2.5, 3.0, 1.0),
)

_DISPLAYED = {
    InternalGrade.G4_PLUS: Grade.G4,
    InternalGrade.G3: Grade.G3,
    InternalGrade.G3_PLUS: Grade.G3,
    InternalGrade.G2_MINUS: Grade.G2,
    InternalGrade.G2: Grade.G2,
    InternalGrade.G2_PLUS: Grade.G2,
    InternalGrade.G1_MINUS: Grade.G1,
    InternalGrade.G1: Grade.G1,
    InternalGrade.G1_PLUS: Grade.G1,
    InternalGrade.S1_MINUS: Grade.S1,
    InternalGrade.S1: Grade.S1,
    InternalGrade.S1_PLUS: Grade.S1,
    InternalGrade.S2: Grade.S2,
    InternalGrade.S3: Grade.S3,
    InternalGrade.S4_MINUS: Grade.S4,
    InternalGrade.S4: Grade.S4,
    InternalGrade.S4_PLUS: Grade.S4,
    InternalGrade.S5: Grade.S5,
    InternalGrade.S5_PLUS: Grade.S5,
    InternalGrade.S6: Grade.S6,
    InternalGrade.S6_PLUS: Grade.S6,
    InternalGrade.S7: Grade.S7,
    InternalGrade.S7_PLUS: Grade.S7,
    InternalGrade.S8: Grade.S8,
    InternalGrade.S8_PLUS: Grade.S8,
}


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def grade_name(grade: int) -> str:
    """Three-character label of a displayed grade; line bits are ignored."""
    grade &= 0xFF
    if grade >= len(_GRADE_NAMES):
        return " --"
    return _GRADE_NAMES[grade]


def internal_grade_name(index: int) -> str:
    """Three-character label of an internal grade, or "N/A" when out of range."""
    if index < 0 or index >= len(_INTERNAL_GRADE_NAMES):
        return "N/A"
    return _INTERNAL_GRADE_NAMES[index]


def internal_to_displayed_grade(internal_grade: int) -> int:
    """Displayed grade for an internal grade; -1 for negative input."""
    if internal_grade < InternalGrade.G9:
        return -1
    if internal_grade <= InternalGrade.G4:
        return internal_grade
    return _DISPLAYED.get(internal_grade, Grade.S9)


def grade_for_score(score: int) -> Grade:
    """Highest grade whose score requirement is met."""
    grade = Grade.G9
    for offset, required in enumerate(SCORE_REQUIREMENTS):
        if score >= required:
            grade = Grade(Grade.G8 + offset)
    return grade


def crossed_grade(old_score: int, new_score: int) -> Grade | None:
    """Highest grade whose requirement lies in (old_score, new_score], or None."""
    crossed = None
    for offset, required in enumerate(SCORE_REQUIREMENTS):
        if old_score < required <= new_score:
            crossed = Grade(Grade.G8 + offset)
    return crossed


def _check_internal(internal_grade: int) -> None:
    if not 0 <= internal_grade < len(_GRADE_POINTS):
        raise ValueError(f"internal grade out of range: {internal_grade}")


def grade_points_for_clear(internal_grade: int, lines: int, combo: int, level: int) -> int:
    """Grade points earned by clearing lines in G2 master mode."""
    _check_internal(internal_grade)
    if not 1 <= lines <= 4:
        raise ValueError(f"line count out of range: {lines}")
    if not 1 <= combo <= len(_COMBO_MULTIPLIERS):
        raise ValueError(f"combo out of range: {combo}")
    points = _GRADE_POINTS[internal_grade][lines - 1]
    multiplier = _f32(_COMBO_MULTIPLIERS[combo - 1][lines - 1])
    return math.ceil(_f32(points * multiplier)) * (1 + level // 250)


def grade_point_decay(internal_grade: int) -> int:
    """Frames between losing one grade point at an internal grade."""
    _check_internal(internal_grade)
    return _GRADE_POINT_DECAYS[internal_grade]