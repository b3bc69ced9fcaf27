"""Test terminal output recording"""
import io

import pytest

from mbasic_term.machine.output_item import ERROR, SYSTEM, TEXT, OutputItem
from mbasic_term.machine.screen import Screen


def test_items_are_recorded():
    screen = Screen()
    screen.print("HELLO\n")
    screen.print_error("Oops\n")
    screen.print_system("Loading...\n")
    screen.acknowledge(newline_first=True)
    assert [item.kind for item in screen.items] == [TEXT, ERROR, SYSTEM, TEXT]
    assert screen.lines == ["HELLO", "Oops", "Loading...", "", "Ok"]
    assert screen.errors() == ["Oops\n"]


def test_custom_prompt():
    screen = Screen(prompt="READY")
    screen.acknowledge()
    assert screen.text == "READY\n"


def test_clear():
    out = io.StringIO()
    screen = Screen(out, styled=True)
    screen.print("x\n")
    screen.clear()
    assert screen.items == []
    assert screen.clears == 1
    assert out.getvalue().endswith("\033[2J\033[H")


def test_styled_stream_keeps_text():
    out = io.StringIO()
    screen = Screen(out, styled=True)
    screen.print_error("Division by zero\n")
    assert "Division by zero" in out.getvalue()
    assert screen.errors() == ["Division by zero\n"]


def test_echo_can_skip_stream():
    out = io.StringIO()
    screen = Screen(out, echo_input=False)
    screen.echo("LIST\n")
    assert out.getvalue() == ""
    assert screen.lines == ["LIST"]


def test_transcript():
    screen = Screen()
    screen.print("HI\n")
    (item,) = screen.transcript()
    assert item["kind"] == TEXT
    assert item["text"] == "HI\n"
    assert item["time"] == screen.items[0].time


def test_bad_kind():
    with pytest.raises(ValueError):
        OutputItem("beep", "")
