"""Test loading engines by reference"""
import pytest

from mbasic_term.engines.echo import EchoEngine
from mbasic_term.files.store import VirtualFileStore
from mbasic_term.machine.engine import Engine, ImportEngineError, load_engine
from mbasic_term.machine.host import EngineHost
from mbasic_term.machine.screen import Screen
from mbasic_term.machine.session import Session


def test_load_echo_engine():
    engine = load_engine("mbasic_term.engines.echo:EchoEngine")
    assert isinstance(engine, EchoEngine)
    assert isinstance(engine, Engine)


@pytest.mark.parametrize(
    "ref",
    [
        "mbasic_term.engines.echo",
        ":EchoEngine",
        "mbasic_term.engines.echo:",
        "no_such_module_for_mbasic:Engine",
        "mbasic_term.engines.echo:NoSuchEngine",
    ],
)
def test_bad_references(ref):
    with pytest.raises(ImportEngineError):
        load_engine(ref)


def test_base_engine_must_be_subclassed():
    engine = Engine()
    with pytest.raises(NotImplementedError):
        engine.load_program("10 END")


def test_echo_engine_rejects_unnumbered_lines():
    engine = EchoEngine()
    assert not engine.load_program("10 PRINT 1\nPRINT 2\n")
    assert engine.last_error == "Parse error at line 2, col 1: expected a line number"
    assert engine.load_program("10 PRINT 1\n\n20 END")
    assert engine.last_error == ""
    host = EngineHost(Session(), Screen(), VirtualFileStore())
    engine.execute(host)
    assert host.screen.lines == ["10 PRINT 1", "20 END"]

    engine.clear()
    host.screen.clear()
    engine.execute(host)
    assert host.screen.text == ""
