"""In-memory named file storage, shared by the editor and the engine"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

from ..exceptions import FileNotFound

LOG = logging.getLogger(__name__)

Observer = Callable[["VirtualFileStore"], None]


@dataclass
class VirtualFile:
    name: str
    content: str

    @property
    def size(self) -> int:
        return len(self.content)


class VirtualFileStore:
    """Name-keyed text files.

    The store uses one explicit case policy, chosen at construction:

    - case_insensitive=True: names are compared in upper case. A file keeps the
      spelling it was last written with, but any spelling finds it, so two
      names that differ only by case refer to the same file.
    - case_insensitive=False: names must match exactly.

    Observers are called (with the store) after every completed mutation.

    """

    def __init__(self, *, case_insensitive=True):
        self.case_insensitive = case_insensitive
        self._files: Dict[str, VirtualFile] = {}
        self._observers: List[Observer] = []

    def _key(self, name: str) -> str:
        return name.upper() if self.case_insensitive else name

    ## observers

    def subscribe(self, observer: Observer):
        self._observers.append(observer)

    def unsubscribe(self, observer: Observer):
        self._observers.remove(observer)

    def _notify(self):
        for observer in list(self._observers):
            observer(self)

    ## reading

    def list(self) -> List[VirtualFile]:
        """All files, in the order they were first stored"""
        return list(self._files.values())

    def names(self) -> List[str]:
        return [f.name for f in self._files.values()]

    def exists(self, name: str) -> bool:
        return self._key(name) in self._files

    def get(self, name: str) -> str:
        try:
            return self._files[self._key(name)].content
        except KeyError:
            raise FileNotFound(name) from None

    def size(self, name: str) -> int:
        return len(self.get(name))

    def __len__(self):
        return len(self._files)

    def __contains__(self, name):
        return self.exists(name)

    ## writing

    def set(self, name: str, content: str):
        if not isinstance(content, str):
            raise TypeError(f"File content must be text, not {type(content)}")
        key = self._key(name)
        if key in self._files:
            entry = self._files[key]
            entry.name = name
            entry.content = content
        else:
            self._files[key] = VirtualFile(name, content)
        LOG.info("Stored %s (%d bytes)", name, len(content))
        self._notify()

    def delete(self, name: str) -> bool:
        """Remove NAME, returning whether it existed"""
        entry = self._files.pop(self._key(name), None)
        if entry is None:
            LOG.info("Delete: %s does not exist", name)
            return False
        LOG.info("Deleted %s", entry.name)
        self._notify()
        return True

    def rename(self, old: str, new: str):
        """Move OLD to NEW, replacing any existing NEW.

        Either the whole move happens or nothing does: a missing OLD raises
        before the store is touched.
        """
        old_key = self._key(old)
        if old_key not in self._files:
            raise FileNotFound(old)

        content = self._files[old_key].content
        new_key = self._key(new)
        # Rebuild in one step so the entry keeps its listing position
        files = {}
        for key, entry in self._files.items():
            if key == old_key:
                files[new_key] = VirtualFile(new, content)
            elif key != new_key:
                files[key] = entry
        self._files = files
        LOG.info("Renamed %s to %s", old, new)
        self._notify()
