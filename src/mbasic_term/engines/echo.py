"""A stand-in engine that prints the program instead of running it

Useful for trying the terminal without a real interpreter, and in tests.

"""

import logging
import re

from ..machine.engine import Engine

LOG = logging.getLogger(__name__)

NUMBERED = re.compile(r"^(\d+)\s*(.*)$", re.ASCII)


class EchoEngine(Engine):
    def __init__(self):
        self.last_error = ""
        self.width = 80
        self._lines = []
        self._stop = False

    def set_width(self, columns: int):
        self.width = columns

    def load_program(self, source: str) -> bool:
        lines = []
        for lineno, raw in enumerate(source.splitlines(), start=1):
            if not raw.strip():
                continue
            if not NUMBERED.match(raw.strip()):
                self.last_error = (
                    f"Parse error at line {lineno}, col 1: expected a line number"
                )
                return False
            lines.append(raw.strip())
        self._lines = lines
        self.last_error = ""
        return True

    def execute(self, host):
        self._stop = False
        for line in self._lines:
            if self._stop or host.break_requested:
                LOG.info("Interrupted")
                return
            host.print(line + "\n")

    def stop(self):
        self._stop = True

    def clear(self):
        self._lines = []
