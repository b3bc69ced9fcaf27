"""Test moving files between disk and the file store"""
import pytest

from mbasic_term.exceptions import FileNotFound
from mbasic_term.files import VirtualFileStore
from mbasic_term.files.transfer import (
    TransferError,
    export_file,
    import_dir,
    import_files,
)


def test_import_files(tmp_path):
    (tmp_path / "hello.bas").write_text('10 PRINT "HI"\n')
    store = VirtualFileStore()
    names = import_files(store, [tmp_path / "hello.bas"])
    assert names == ["hello.bas"]
    assert store.get("HELLO.BAS") == '10 PRINT "HI"\n'


def test_import_missing(tmp_path):
    with pytest.raises(TransferError):
        import_files(VirtualFileStore(), [tmp_path / "nope.bas"])


def test_import_binary(tmp_path):
    (tmp_path / "blob.bin").write_bytes(b"\xff\xfe\x00\x81")
    with pytest.raises(TransferError):
        import_files(VirtualFileStore(), [tmp_path / "blob.bin"])


def test_import_dir(tmp_path):
    (tmp_path / "b.bas").write_text("10 B")
    (tmp_path / "a.bas").write_text("10 A")
    (tmp_path / "sub").mkdir()
    store = VirtualFileStore()
    assert import_dir(store, tmp_path) == ["a.bas", "b.bas"]
    assert len(store) == 2


def test_import_dir_not_a_dir(tmp_path):
    with pytest.raises(TransferError):
        import_dir(VirtualFileStore(), tmp_path / "missing")


def test_export_into_dir(tmp_path):
    store = VirtualFileStore()
    store.set("OUT.BAS", "10 END")
    dest = export_file(store, "out.bas", tmp_path)
    assert dest == tmp_path / "out.bas"
    assert dest.read_text() == "10 END"


def test_export_to_file(tmp_path):
    store = VirtualFileStore()
    store.set("OUT.BAS", "10 END")
    export_file(store, "OUT.BAS", tmp_path / "renamed.bas")
    assert (tmp_path / "renamed.bas").read_text() == "10 END"


def test_export_missing(tmp_path):
    with pytest.raises(FileNotFound):
        export_file(VirtualFileStore(), "NOPE", tmp_path)
