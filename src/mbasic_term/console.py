"""The terminal session: every component, wired together

The Console is what a front-end talks to. It receives terminal events (a
submitted line, a key press, history keys, the run/stop buttons, clicks in
the file list) and routes them to the right component.

"""

import logging
from typing import TextIO, Union

from . import config as config_mod
from .config import Config
from .dispatch import CommandDispatcher
from .editor.buffer import ProgramBuffer
from .exceptions import UserResolvableError
from .files.store import VirtualFileStore
from .history import HistoryNavigator
from .machine.bridge import ExecutionBridge
from .machine.engine import Engine, ImportEngineError, load_engine
from .machine.host import EngineHost
from .machine.screen import Screen
from .machine.session import Session

LOG = logging.getLogger(__name__)

ESCAPE = "\x1b"


class Console:
    def __init__(
        self,
        cfg: Union[Config, None] = None,
        engine: Union[Engine, None] = None,
        *,
        stream: Union[TextIO, None] = None,
        styled: bool = False,
        echo_input: bool = True,
    ):
        self.cfg = cfg or config_mod.default()
        prompt = self.cfg.terminal.prompt
        self.screen = Screen(
            stream, prompt=prompt, styled=styled, echo_input=echo_input
        )
        self.store = VirtualFileStore(case_insensitive=self.cfg.files.case_insensitive)
        self.buffer = ProgramBuffer()
        self.history = HistoryNavigator()
        self.session = Session(prompt=prompt)
        self.host = EngineHost(self.session, self.screen, self.store)
        self.bridge = ExecutionBridge(self.session, self.screen, self.host)
        self.dispatcher = CommandDispatcher(
            self.session, self.bridge, self.buffer, self.store, self.screen
        )
        if engine is not None:
            self.attach(engine)

    ## engine lifecycle

    def load_engine(self, ref: str) -> Engine:
        """Import the engine named by REF and attach it"""
        self.screen.print_system(f"Loading {ref}...\n")
        try:
            engine = load_engine(ref)
        except ImportEngineError as exc:
            self.screen.print_error(f"Failed to load engine: {exc.msg}\n")
            raise
        self.attach(engine)
        return engine

    def attach(self, engine: Engine):
        """Attach a freshly loaded engine and show the banner"""
        self.session.attach(engine)
        set_width = getattr(engine, "set_width", None)
        if set_width is not None:
            set_width(self.cfg.terminal.width)
        self.screen.clear()
        for line in self.cfg.terminal.banner:
            self.screen.print(line + "\n")
        self.screen.acknowledge()

    def detach(self):
        self.bridge.shutdown()
        self.session.detach()

    ## terminal events

    def submit(self, text: str):
        """A line was entered in the main input"""
        self.screen.echo(text + "\n")

        if self.session.pending_input is not None:
            # The program is waiting for this
            self.bridge.submit(text)
            return

        self.history.record(text)
        if text.strip():
            self.dispatcher.dispatch(text)
        else:
            self.screen.acknowledge()

    def key(self, key: str, *, in_input=False):
        """A key was pressed.

        Keys pressed while a program runs (anywhere but the main input) are
        buffered for the engine to poll. Escape in the main input is always
        buffered. Named keys that aren't single characters are dropped.
        """
        if in_input:
            if key == ESCAPE:
                self.session.push_key(ESCAPE)
            return
        if self.session.running and len(key) == 1:
            self.session.push_key(key)

    def history_prev(self) -> Union[str, None]:
        return self.history.prev()

    def history_next(self) -> str:
        return self.history.next()

    ## buttons

    def run(self):
        self.dispatcher.dispatch("RUN")

    def stop(self):
        try:
            self.bridge.stop()
        except UserResolvableError as exc:
            LOG.info("Stop ignored: %s", exc.msg)

    ## file list

    def open_file(self, name: str):
        """Put a stored file in the editor"""
        self.buffer.load_text(self.store.get(name))

    def delete_file(self, name: str) -> bool:
        return self.store.delete(name)
