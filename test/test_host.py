"""Test the services offered to engines"""
import pytest

from mbasic_term.files.store import VirtualFileStore
from mbasic_term.machine.host import EngineHost, file_mode
from mbasic_term.machine.screen import Screen
from mbasic_term.machine.session import Session


@pytest.fixture
def host():
    return EngineHost(Session(), Screen(), VirtualFileStore())


@pytest.mark.parametrize(
    "mode,name",
    [(0, "input"), (1, "output"), (2, "append"), (3, "random"), ("OUTPUT", "output")],
)
def test_file_mode(mode, name):
    assert file_mode(mode) == name


@pytest.mark.parametrize("mode", [4, -9, "write", True])
def test_bad_file_mode(mode):
    with pytest.raises(ValueError):
        file_mode(mode)


def test_open_missing(host):
    assert host.file_open("DATA.TXT", "input") is None
    assert host.file_open("DATA.TXT", "output") == ""
    assert host.file_open("DATA.TXT", "append") == ""
    assert host.file_open("DATA.TXT", "random", 64) == ""


def test_open_existing(host):
    host.file_save("DATA.TXT", "1,2,3\n")
    assert host.file_open("data.txt", 0) == "1,2,3\n"
    assert host.file_open("DATA.TXT", 2) == "1,2,3\n"
    assert host.file_open("DATA.TXT", 1) == ""


def test_file_management(host):
    host.file_save("A", "a")
    assert host.file_exists("A")
    assert host.file_rename("A", "B")
    assert not host.file_exists("A")
    assert not host.file_rename("A", "C")
    assert host.file_delete("B")
    assert not host.file_delete("B")


def test_print_and_clear(host):
    host.print("HELLO\n")
    assert host.screen.lines == ["HELLO"]
    host.clear_screen()
    assert host.screen.lines == []


def test_request_input_prints_prompt(host):
    request = host.request_input("? ")
    assert host.screen.text == "? "
    assert host.session.pending_input is request
    assert request.prompt == "? "


def test_break_requested(host):
    assert not host.break_requested
    host.session.break_requested = True
    assert host.break_requested
