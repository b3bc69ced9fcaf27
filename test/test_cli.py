"""Test the mbasic command line tool"""
import sys
from subprocess import PIPE, Popen


def mbasic_cli(*args, stdin="", cwd=None):
    """Run mbasic and return (decoded) outputs"""
    p = Popen(
        [sys.executable, "-m", "mbasic_term.cli.main", "-q", "--no-colours", *args],
        stdout=PIPE,
        stderr=PIPE,
        stdin=PIPE,
        cwd=cwd,
    )
    stdout, stderr = p.communicate(stdin.encode())
    return stdout.decode(), stderr.decode(), p.returncode


def test_version():
    stdout, _, code = mbasic_cli("--version")
    assert not code
    assert stdout.strip() == "0.1.0"


def test_run_program(tmp_path):
    (tmp_path / "hello.bas").write_text('20 END\n10 PRINT "HI"\n')
    stdout, stderr, code = mbasic_cli("--run", "hello.bas", cwd=tmp_path)
    assert not code, stderr
    assert "Loaded hello.bas" in stdout
    assert stdout.endswith('\n10 PRINT "HI"\n20 END\n\nOk\n')


def test_repl_reads_stdin(tmp_path):
    stdout, _, code = mbasic_cli(stdin="20 B\n10 A\nLIST\n", cwd=tmp_path)
    assert not code
    assert "10 A\n20 B\nOk\n" in stdout


def test_export_on_exit(tmp_path):
    outdir = tmp_path / "out"
    outdir.mkdir()
    stdin = '10 PRINT 1\nSAVE "NEW.BAS"\n'
    _, stderr, code = mbasic_cli(
        "-e", "NEW.BAS", "-e", "MISSING.BAS", "-o", str(outdir), stdin=stdin, cwd=tmp_path
    )
    assert not code, stderr
    assert (outdir / "NEW.BAS").read_text() == "10 PRINT 1"


def test_missing_program(tmp_path):
    stdout, _, code = mbasic_cli("nope.bas", cwd=tmp_path)
    assert code == 1
    assert "not found" in stdout


def test_bad_engine(tmp_path):
    stdout, _, code = mbasic_cli("--engine=no_such_module_for_mbasic:X", cwd=tmp_path)
    assert code == 1
    assert "Cannot find Python module" in stdout
