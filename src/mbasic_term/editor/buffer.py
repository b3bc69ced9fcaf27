"""The numbered-line program buffer

Lines are edited the classic way: typing a numbered line inserts it or
replaces the line with that number, and typing just a number deletes it.

"""

import logging
import re
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterator, List, Union

LOG = logging.getLogger(__name__)

# Leading whitespace may be any Unicode space, the number is ASCII digits only
LINE_NUMBER = re.compile(r"^\s*([0-9]+)(.*)$", re.DOTALL)


@dataclass
class ProgramLine:
    number: int
    text: str

    def __str__(self):
        return f"{self.number} {self.text}"


def split_line(line: str):
    """Split a numbered line into (number, text)"""
    match = LINE_NUMBER.match(line)
    if not match:
        raise ValueError(f"Not a numbered line: {line!r}")
    return int(match.group(1)), match.group(2).strip()


class ProgramBuffer:
    """Numbered program lines, always sorted by number, one per number"""

    def __init__(self):
        self._lines: List[ProgramLine] = []

    def _find(self, number) -> Union[int, None]:
        for idx, line in enumerate(self._lines):
            if line.number == number:
                return idx
        return None

    def merge(self, line: str):
        """Insert, replace or delete a line by its number"""
        number, text = split_line(line)
        idx = self._find(number)

        if idx is not None:
            if text:
                LOG.debug("Replace line %d", number)
                self._lines[idx].text = text
            else:
                LOG.debug("Delete line %d", number)
                del self._lines[idx]
        elif text:
            LOG.debug("Insert line %d", number)
            self._lines.append(ProgramLine(number, text))
        else:
            # deleting a line that doesn't exist is harmless
            return

        # list.sort is stable - untouched lines keep their relative order
        self._lines.sort(key=attrgetter("number"))

    def clear(self):
        self._lines = []

    def load_text(self, text: str):
        """Replace the buffer with the numbered lines in TEXT"""
        self.clear()
        for raw in text.splitlines():
            if not raw.strip():
                continue
            if not LINE_NUMBER.match(raw):
                LOG.warning("Skipping unnumbered line: %r", raw)
                continue
            self.merge(raw)

    def get(self, number: int) -> Union[ProgramLine, None]:
        idx = self._find(number)
        return None if idx is None else self._lines[idx]

    @property
    def lines(self) -> List[ProgramLine]:
        return list(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(str(line) for line in self._lines)

    def __iter__(self) -> Iterator[ProgramLine]:
        return iter(list(self._lines))

    def __len__(self):
        return len(self._lines)

    def __bool__(self):
        return bool(self._lines)
