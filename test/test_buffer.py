"""Test the numbered-line program buffer"""
import random

import pytest

from mbasic_term.editor.buffer import ProgramBuffer, ProgramLine, split_line


def numbers(buf):
    return [line.number for line in buf]


def buffer_with(*lines):
    buf = ProgramBuffer()
    for line in lines:
        buf.merge(line)
    return buf


def test_insert_keeps_lines_sorted():
    buf = buffer_with("30 END", "10 PRINT 1", "20 PRINT 2")
    assert numbers(buf) == [10, 20, 30]
    assert buf.text == "10 PRINT 1\n20 PRINT 2\n30 END"


def test_replace_line():
    buf = buffer_with("10 PRINT 1", "20 PRINT 2", "10 PRINT 99")
    assert len(buf) == 2
    assert buf.get(10).text == "PRINT 99"
    assert numbers(buf) == [10, 20]


@pytest.mark.parametrize("delete", ["20", "20 ", "  20"])
def test_bare_number_deletes(delete):
    buf = buffer_with("10 A", "20 B", "30 C")
    buf.merge(delete)
    assert numbers(buf) == [10, 30]
    assert buf.get(20) is None


def test_delete_missing_line_is_noop():
    buf = buffer_with("10 A")
    buf.merge("99")
    assert buf.lines == [ProgramLine(10, "A")]


def test_text_is_normalised():
    buf = buffer_with("  10    PRINT   \"X\"  ")
    assert str(buf.get(10)) == '10 PRINT   "X"'


def test_load_text_replaces_and_skips_junk():
    buf = buffer_with("5 OLD")
    buf.load_text("20 B\n\nnot a line\n10 A\n")
    assert buf.text == "10 A\n20 B"


def test_empty_buffer_is_falsy():
    buf = ProgramBuffer()
    assert not buf
    assert buf.text == ""
    buf.merge("1 X")
    assert buf


def test_split_line():
    assert split_line("100 GOTO 10") == (100, "GOTO 10")
    assert split_line("007") == (7, "")
    with pytest.raises(ValueError):
        split_line("PRINT 1")


@pytest.mark.parametrize("seed", range(10))
def test_random_merges_stay_sorted(seed):
    rng = random.Random(seed)
    buf = ProgramBuffer()
    expected = {}
    for _ in range(60):
        number = rng.choice(range(0, 200, 10))
        if rng.random() < 0.3:
            buf.merge(str(number))
            expected.pop(number, None)
        else:
            text = f"PRINT {rng.randint(0, 9)}"
            buf.merge(f"{number} {text}")
            expected[number] = text
        assert numbers(buf) == sorted(expected)
        assert [line.text for line in buf] == [expected[n] for n in sorted(expected)]


@pytest.mark.parametrize("space", ["\xa0", "　", "\t"])
def test_unicode_leading_space(space):
    buf = ProgramBuffer()
    buf.merge(space + "10 PRINT 1")
    assert buf.text == "10 PRINT 1"


def test_non_ascii_digits_are_not_line_numbers():
    with pytest.raises(ValueError):
        split_line("١٠ PRINT 1")
