"""Session state"""

import logging
from collections import deque
from typing import Deque, Union

from ..exceptions import EngineUnavailable
from .continuation import Continuation
from .engine import Engine

LOG = logging.getLogger(__name__)


class Session:
    """State shared by the dispatcher and the bridge for one engine's life.

    A session is constructed by attaching an engine and torn down by detaching
    it. It is passed explicitly to whatever needs it.

    """

    def __init__(self, engine: Union[Engine, None] = None, *, prompt="Ok"):
        self.engine = None
        self.running = False
        self.pending_input: Union[Continuation, None] = None
        self.key_buffer: Deque[str] = deque()
        self.break_requested = False
        self.run_enabled = True
        self.stop_enabled = False
        self.idle_prompt = prompt
        self.prompt = prompt
        if engine is not None:
            self.attach(engine)

    def attach(self, engine: Engine):
        LOG.info("Attaching engine %s", engine)
        self.engine = engine

    def detach(self):
        """Tear down: interrupt anything running and drop the engine"""
        if self.engine is None:
            return
        if self.running:
            self.engine.stop()
        if self.pending_input is not None:
            self.pending_input.cancel()
        LOG.info("Detaching engine %s", self.engine)
        self.engine = None
        self.pending_input = None
        self.key_buffer.clear()
        self.set_running(False)

    @property
    def engine_ready(self) -> bool:
        return self.engine is not None

    def require_engine(self) -> Engine:
        if self.engine is None:
            raise EngineUnavailable()
        return self.engine

    def set_running(self, running: bool):
        """Toggle running, and the run/stop controls and prompt with it"""
        self.running = running
        self.run_enabled = not running
        self.stop_enabled = running
        self.prompt = "" if running else self.idle_prompt
        if running:
            self.break_requested = False

    def push_key(self, key: str):
        self.key_buffer.append(key)

    def pop_key(self) -> Union[str, None]:
        if self.key_buffer:
            return self.key_buffer.popleft()
        return None
