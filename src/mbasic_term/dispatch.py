"""Classify and route a line typed at the terminal

A line is one of:

- a system command: NEW, LIST, RUN, CLS, FILES
- a file command: LOAD <name>, SAVE <name>
- a numbered program line, which is merged into the program buffer
- anything else, an immediate statement for the engine

Keywords are case-insensitive. File names are taken literally.

"""

import logging
import string
from collections import namedtuple

from texttable import Texttable

from .editor.buffer import ProgramBuffer
from .exceptions import UserResolvableError
from .files.store import VirtualFileStore
from .machine.bridge import ExecutionBridge
from .machine.screen import Screen
from .machine.session import Session

LOG = logging.getLogger(__name__)

SYSTEM_COMMANDS = ("NEW", "LIST", "RUN", "CLS", "FILES")
FILE_COMMANDS = ("LOAD", "SAVE")

SYSTEM = "system"
FILE = "file"
LINE = "line"
IMMEDIATE = "immediate"

Command = namedtuple("Command", ["kind", "name", "payload"])


class MissingFileName(UserResolvableError):
    """No file name given"""

    def __init__(self, command):
        super().__init__("Missing file name", f'Usage: {command} "NAME"')


def strip_quotes(name: str) -> str:
    name = name.strip()
    if len(name) >= 2 and name[0] == name[-1] and name[0] in "\"'":
        name = name[1:-1]
    return name


def classify(raw: str) -> Command:
    """Work out what kind of command RAW is. Nothing is executed."""
    text = raw.strip()
    folded = text.upper()

    if folded in SYSTEM_COMMANDS:
        return Command(SYSTEM, folded, None)

    for name in FILE_COMMANDS:
        if folded.startswith(name + " "):
            return Command(FILE, name, strip_quotes(text[len(name) + 1 :]))

    if text and text[0] in string.digits:
        return Command(LINE, None, raw)

    return Command(IMMEDIATE, None, raw)


def format_files(store: VirtualFileStore) -> str:
    table = Texttable(max_width=0)
    table.set_deco(0)
    table.set_cols_align(["l", "r"])
    table.set_cols_dtype(["t", "t"])
    for entry in store.list():
        table.add_row([entry.name, f"{entry.size} bytes"])
    return table.draw()


class CommandDispatcher:
    def __init__(
        self,
        session: Session,
        bridge: ExecutionBridge,
        buffer: ProgramBuffer,
        store: VirtualFileStore,
        screen: Screen,
    ):
        self.session = session
        self.bridge = bridge
        self.buffer = buffer
        self.store = store
        self.screen = screen
        self._handlers = {
            "NEW": self._new,
            "LIST": self._list,
            "RUN": self._run,
            "CLS": self._cls,
            "FILES": self._files,
            "LOAD": self._load,
            "SAVE": self._save,
        }

    def dispatch(self, raw: str):
        """Execute one command line.

        Every command ends with exactly one acknowledgment. User errors are
        shown as an error line, and acknowledged too.
        """
        cmd = classify(raw)
        LOG.info("Dispatch %s %s", cmd.kind, cmd.name or "")
        try:
            if cmd.kind == SYSTEM:
                self._handlers[cmd.name]()
            elif cmd.kind == FILE:
                if not cmd.payload:
                    raise MissingFileName(cmd.name)
                self._handlers[cmd.name](cmd.payload)
            elif cmd.kind == LINE:
                self.buffer.merge(cmd.payload)
                self.screen.acknowledge()
            else:
                # acknowledged by the bridge when the statement finishes
                self.bridge.execute_immediate(cmd.payload)
        except UserResolvableError as exc:
            LOG.info("%s: %s", type(exc).__name__, exc.msg)
            self.screen.print_error(exc.msg + "\n")
            self.screen.acknowledge()
        return cmd

    ## handlers

    def _new(self):
        self.buffer.clear()
        if self.session.engine_ready:
            self.session.engine.clear()
        self.screen.acknowledge()

    def _list(self):
        if self.buffer:
            self.screen.print(self.buffer.text + "\n")
        self.screen.acknowledge()

    def _run(self):
        # acknowledged by the bridge when the program stops
        self.bridge.run(self.buffer.text)

    def _cls(self):
        self.screen.clear()
        self.screen.acknowledge()

    def _files(self):
        if not len(self.store):
            self.screen.print("No files\n")
        else:
            self.screen.print(format_files(self.store) + "\n")
        self.screen.acknowledge()

    def _load(self, name):
        content = self.store.get(name)
        self.buffer.load_text(content)
        self.screen.print(f"Loaded {name}\n")
        self.screen.acknowledge()

    def _save(self, name):
        self.store.set(name, self.buffer.text)
        self.screen.print(f"Saved {name}\n")
        self.screen.acknowledge()
