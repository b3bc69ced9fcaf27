"""The services the session offers to a running engine"""

import logging
from typing import Union

from ..exceptions import InputContractError
from ..files.store import VirtualFileStore
from .continuation import Continuation
from .screen import Screen
from .session import Session

LOG = logging.getLogger(__name__)

# Engine file modes, by name or by index
FILE_MODES = ("input", "output", "append", "random")


def file_mode(mode) -> str:
    if isinstance(mode, int) and not isinstance(mode, bool):
        if not 0 <= mode < len(FILE_MODES):
            raise ValueError(f"Bad file mode: {mode}")
        return FILE_MODES[mode]
    mode = str(mode).lower()
    if mode not in FILE_MODES:
        raise ValueError(f"Bad file mode: {mode}")
    return mode


class EngineHost:
    """Terminal and file callbacks, called by the engine"""

    def __init__(self, session: Session, screen: Screen, store: VirtualFileStore):
        self.session = session
        self.screen = screen
        self.store = store

    ## terminal

    def print(self, text: str):
        self.screen.print(text)

    def clear_screen(self):
        self.screen.clear()

    def request_input(self, prompt: str = "") -> Continuation:
        """Ask for a line of input. The engine must yield the result."""
        if self.session.pending_input is not None:
            raise InputContractError(
                f"Input requested while {self.session.pending_input} is outstanding"
            )
        if prompt:
            self.screen.print(prompt)
        continuation = Continuation(prompt=prompt)
        self.session.pending_input = continuation
        LOG.info("Input requested: %s", continuation)
        return continuation

    def poll_key(self) -> Union[str, None]:
        """Next buffered key, or None. Never waits."""
        return self.session.pop_key()

    @property
    def break_requested(self) -> bool:
        return self.session.break_requested

    ## files

    def file_open(self, name: str, mode, record_length: int = 128) -> Union[str, None]:
        """Contents for a newly opened file.

        Input mode returns None if the file doesn't exist. Output mode always
        starts empty; append and random modes start from any existing content.
        """
        mode = file_mode(mode)
        LOG.info("Open %s for %s (record length %d)", name, mode, record_length)
        if mode == "output":
            return ""
        if self.store.exists(name):
            return self.store.get(name)
        return None if mode == "input" else ""

    def file_save(self, name: str, data: str):
        self.store.set(name, data)

    def file_exists(self, name: str) -> bool:
        return self.store.exists(name)

    def file_delete(self, name: str) -> bool:
        return self.store.delete(name)

    def file_rename(self, old: str, new: str) -> bool:
        if not self.store.exists(old):
            return False
        self.store.rename(old, new)
        return True
