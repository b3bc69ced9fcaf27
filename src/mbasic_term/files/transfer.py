"""Move files between the real filesystem and a VirtualFileStore"""

import logging
from pathlib import Path
from typing import Iterable, List

from ..exceptions import UserResolvableError
from .store import VirtualFileStore

LOG = logging.getLogger(__name__)


class TransferError(UserResolvableError):
    """Error transferring a file"""


def import_files(store: VirtualFileStore, paths: Iterable[Path]) -> List[str]:
    """Store each text file under its base name, returning the stored names"""
    stored = []
    for path in map(Path, paths):
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise TransferError(f"{path} not found", "Check the file name.")
        except UnicodeDecodeError as exc:
            raise TransferError(
                f"{path} is not a text file", "Only text files can be imported."
            ) from exc
        store.set(path.name, content)
        stored.append(path.name)
    LOG.info("Imported %d files", len(stored))
    return stored


def import_dir(store: VirtualFileStore, dirname: Path) -> List[str]:
    """Import every regular file in DIRNAME (not recursive)"""
    dirname = Path(dirname)
    if not dirname.is_dir():
        raise TransferError(f"{dirname} is not a directory", "Check [files] import_dir.")
    return import_files(store, sorted(p for p in dirname.iterdir() if p.is_file()))


def export_file(store: VirtualFileStore, name: str, dest: Path) -> Path:
    """Write one stored file to disk.

    If DEST is a directory the file is written inside it under NAME. Raises
    FileNotFound if NAME isn't stored.
    """
    content = store.get(name)
    dest = Path(dest)
    if dest.is_dir():
        dest = dest / name
    dest.write_text(content, encoding="utf-8")
    LOG.info("Exported %s to %s", name, dest)
    return dest
