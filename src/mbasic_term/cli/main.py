"""MBASIC terminal.

Usage:
  mbasic [options] [--import=FILE]... [--export=NAME]... [PROGRAM]
  mbasic --version
  mbasic -h | --help

Type BASIC lines at the prompt. Numbered lines go into the program, and
NEW, LIST, RUN, CLS, FILES, LOAD "name" and SAVE "name" are commands.
End the session with Ctrl-D. Ctrl-C stops a running program.

Options:
  --version       Show version.
  -h, --help      Show this screen.
  -q, --quiet     Be quiet.
  -v, --verbose   Be verbose.
  -V, --vverbose  Be very verbose.
  --no-colours    Disable colours in CLI output.

  --config=CONFIG    Config file to use (default: mbasic.toml, if it exists)
  --engine=FACTORY   Engine to load, as "package.module:factory"

  -r, --run              Run PROGRAM and exit
  -i FILE, --import=FILE  Copy a file into the session's file store
  -e NAME, --export=NAME  Write a stored file to disk when the session ends
  -o DIR, --outdir=DIR    Where exported files go (overrides [files] export_dir)
"""

import logging
import sys
from pathlib import Path

from docopt import docopt

from .. import __version__, config
from ..console import Console
from ..exceptions import FileNotFound, UnexpectedError, UserResolvableError
from ..files import transfer
from .interface import (
    CROSS,
    TICK,
    bad,
    dim,
    exit_bug,
    exit_problem,
    good,
    info,
    init,
    spin,
)

LOG = logging.getLogger(__name__)


def _load_engine(console: Console, ref: str):
    with spin(f"Loading {ref}") as sp:
        try:
            console.load_engine(ref)
        except UserResolvableError:
            sp.fail(CROSS)
            raise
        sp.ok(TICK)


def _import_files(console: Console, cfg: config.Config, args):
    if cfg.files.import_dir:
        names = transfer.import_dir(console.store, cfg.files.import_dir)
        LOG.info("Imported from %s: %s", cfg.files.import_dir, names)
    if args["--import"]:
        transfer.import_files(console.store, args["--import"])


def _export_files(console: Console, cfg: config.Config, args):
    outdir = Path(args["--outdir"]) if args["--outdir"] else cfg.files.export_dir
    for name in args["--export"]:
        try:
            dest = transfer.export_file(console.store, name, outdir)
        except FileNotFound as exc:
            print(bad(exc.msg))
            continue
        info(TICK + " Exported " + good(str(dest)))


def repl(console: Console):
    """Read lines from stdin until EOF"""
    while True:
        try:
            line = input("")
        except EOFError:
            break
        except KeyboardInterrupt:
            console.stop()
            continue
        try:
            console.submit(line)
        except KeyboardInterrupt:
            console.stop()


def run_program(console: Console) -> int:
    """Run the loaded program, feeding stdin to any input requests"""
    console.run()
    while console.bridge.waiting_for_input:
        line = sys.stdin.readline()
        if not line:
            LOG.info("stdin closed while the program was waiting for input")
            console.stop()
            break
        console.submit(line.rstrip("\n"))
    return 1 if console.screen.errors() else 0


def _session(args) -> int:
    cfg = config.load(args)
    ref = args["--engine"] or cfg.engine.factory
    styled = not args["--no-colours"] and cfg.terminal.colours

    console = Console(
        cfg, stream=sys.stdout, styled=styled, echo_input=not sys.stdin.isatty()
    )
    _load_engine(console, ref)
    try:
        _import_files(console, cfg, args)

        if args["PROGRAM"]:
            (name,) = transfer.import_files(console.store, [args["PROGRAM"]])
            console.submit(f'LOAD "{name}"')

        if args["--run"]:
            if not args["PROGRAM"]:
                exit_problem("Nothing to run.", "Give a PROGRAM with --run.")
            return run_program(console)

        repl(console)
        return 0
    finally:
        console.detach()
        _export_files(console, cfg, args)
        LOG.debug("Session transcript: %s", console.screen.transcript())


def dispatch(args) -> int:
    code = _session(args)
    if not args["--quiet"]:
        sys.stderr.write(str(dim("\n-- bye\n")))
    return code


def main():
    args = docopt(__doc__, version=__version__)
    init(args)
    LOG.debug("CLI args: %s", args)

    try:
        code = dispatch(args)
    except UserResolvableError as exc:
        exit_problem(exc.msg, exc.suggested_fix)
    except UnexpectedError as exc:
        exit_bug(str(exc))

    sys.exit(code)


if __name__ == "__main__":
    main()
