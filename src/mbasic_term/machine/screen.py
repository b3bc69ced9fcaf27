"""Terminal output"""

import logging
from typing import List, TextIO, Union

from ..cli import interface as ui
from .output_item import ERROR, SYSTEM, TEXT, OutputItem

LOG = logging.getLogger(__name__)


class Screen:
    """Everything printed to the terminal since the last clear.

    Items are kept so the session can be inspected (and tested) without a
    real terminal. If a stream is given, output is written to it at the same
    time, with errors and system messages styled.

    """

    def __init__(
        self,
        stream: Union[TextIO, None] = None,
        *,
        prompt="Ok",
        styled=False,
        echo_input=True,
    ):
        self.stream = stream
        self.echo_input = echo_input
        self.prompt = prompt
        self.styled = styled
        self.items: List[OutputItem] = []
        self.clears = 0

    def _emit(self, kind, text, *, to_stream=True):
        item = OutputItem(kind, text)
        self.items.append(item)
        if to_stream and self.stream is not None:
            if self.styled and kind == ERROR:
                text = str(ui.bad(text))
            elif self.styled and kind == SYSTEM:
                text = str(ui.dim(text))
            self.stream.write(text)
            self.stream.flush()

    def print(self, text: str):
        self._emit(TEXT, text)

    def echo(self, text: str):
        """Show a line the user typed. A real terminal has already shown it."""
        self._emit(TEXT, text, to_stream=self.echo_input)

    def print_error(self, text: str):
        self._emit(ERROR, text)

    def print_system(self, text: str):
        self._emit(SYSTEM, text)

    def acknowledge(self, *, newline_first=False):
        """Re-arm the prompt"""
        self.print(("\n" if newline_first else "") + self.prompt + "\n")

    def clear(self):
        self.items = []
        self.clears += 1
        if self.stream is not None and self.styled:
            self.stream.write("\033[2J\033[H")
            self.stream.flush()

    @property
    def text(self) -> str:
        return "".join(item.text for item in self.items)

    @property
    def lines(self) -> List[str]:
        return self.text.splitlines()

    def errors(self) -> List[str]:
        return [item.text for item in self.items if item.kind == ERROR]

    def transcript(self) -> List[dict]:
        return [item.serialise() for item in self.items]
