"""Command history recall"""

from typing import List, Union


class HistoryNavigator:
    """Previously submitted lines, with an up/down cursor.

    The cursor is an index into the log, or len(log) meaning "end" (past the
    newest entry, where a fresh line is being typed).

    """

    def __init__(self):
        self._log: List[str] = []
        self.cursor = 0

    @property
    def entries(self) -> List[str]:
        return list(self._log)

    @property
    def at_end(self) -> bool:
        return self.cursor == len(self._log)

    def record(self, cmd: str):
        if cmd.strip():
            self._log.append(cmd)
        self.cursor = len(self._log)

    def prev(self) -> Union[str, None]:
        if self.cursor == 0:
            return None
        self.cursor -= 1
        return self._log[self.cursor]

    def next(self) -> str:
        if self.at_end:
            return ""
        self.cursor += 1
        if self.at_end:
            return ""
        return self._log[self.cursor]

    def __len__(self):
        return len(self._log)
