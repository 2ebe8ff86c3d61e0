import pytest

from qsmino.seqparse import MAX_ITEMS, parse_sequence
from qsmino.usrseq import REPEAT_COUNT_MAX, SequenceFlag, UserSequence, expand_sequence

PIECES = {"I": 0, "J": 1, "L": 2, "A": 3, "B": 4}
I, J, L, A, B = (PIECES[k] for k in "IJLAB")
START = int(SequenceFlag.REPEAT_START)
END = int(SequenceFlag.REPEAT_END)
INF = int(SequenceFlag.REPEAT_INF)


def resolve(name):
    return PIECES.get(name)


def test_plain_letters():
    assert parse_sequence("IJL", resolve) == [I, J, L]


def test_empty_text():
    assert parse_sequence("", resolve) == []


def test_ignored_characters_and_unknown_letters():
    assert parse_sequence("I x-J Q", resolve) == [I, J]


def test_group_with_count_expands():
    seq = parse_sequence("(IJ)*3", resolve)
    assert seq == [I | START, J | END, 3]
    assert expand_sequence(seq) == [I, J] * 3


def test_group_without_star_has_no_count():
    seq = parse_sequence("(IJ)3", resolve)
    assert seq == [I | START, J | END]
    assert expand_sequence(seq) == [I, J]


def test_group_followed_by_piece_gets_single_repeat():
    assert parse_sequence("(IJ)L", resolve) == [I | START, J | END, 1, L]


def test_single_piece_repeat():
    seq = parse_sequence("IJ*2", resolve)
    assert seq == [I, J | START | END, 2]
    assert expand_sequence(seq) == [I, J, J]


def test_trailing_star_defaults_to_one():
    assert parse_sequence("I*", resolve) == [I | START | END, 1]


def test_infinite_repeat():
    seq = parse_sequence("I*INF", resolve)
    assert seq == [I | START | END, INF]
    user = UserSequence(seq)
    assert all(user.element(n) == I for n in range(10))


def test_infinite_stops_parsing():
    assert parse_sequence("(JL)*INFI", resolve)[-1] == INF


def test_letter_after_star_is_taken_as_count():
    assert parse_sequence("A*B", resolve) == [A | START | END, 1]


def test_count_is_bounded():
    seq = parse_sequence("I*98765", resolve)
    assert seq[0] == I | START | END
    assert 0 <= seq[1] <= REPEAT_COUNT_MAX


def test_suffix_names_resolved():
    names = {"I4": 20, "J": 1, "Ja": 7, "Lb": 9}
    assert parse_sequence("I4", names.get) == [20]
    assert parse_sequence("Ja", names.get) == [1]
    assert parse_sequence("Lb", names.get) == [9]


def test_four_suffix_falls_back_to_letter():
    assert parse_sequence("I4", resolve) == [I]


def test_too_long_sequence_rejected():
    with pytest.raises(ValueError):
        parse_sequence("I" * (MAX_ITEMS + 1), resolve)


@pytest.mark.parametrize("text", ["IJL", "(IJ)*2L", "I*3J", "(JL)*INF"])
def test_parsed_items_expand_to_known_pieces(text):
    expanded = expand_sequence(parse_sequence(text, resolve))
    assert expanded
    assert all((v & 0b11111) in PIECES.values() for v in expanded)