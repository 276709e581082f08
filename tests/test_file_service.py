import pytest

from pypad.services.file_service import FileService


def test_file_service_read_write_atomic_success(tmp_path):
    fs = FileService()
    p = tmp_path / "a.md"
    fs.write_text_atomic(p, "héllo")
    assert p.read_text(encoding="utf-8") == "héllo"
    assert fs.read_text(p) == "héllo"


def test_file_service_overwrites_existing(tmp_path):
    fs = FileService()
    p = tmp_path / "a.txt"
    p.write_text("old content that is longer", encoding="utf-8")
    fs.write_text_atomic(p, "new")
    assert p.read_text(encoding="utf-8") == "new"


def test_file_service_read_text_missing(tmp_path):
    fs = FileService()
    with pytest.raises(FileNotFoundError):
        fs.read_text(tmp_path / "missing.md")


def test_file_service_read_rejects_non_utf8(tmp_path):
    p = tmp_path / "bin.dat"
    p.write_bytes(b"\xff\xfe\x00\x81")
    with pytest.raises(UnicodeDecodeError):
        FileService().read_text(p)


def test_file_service_modified_at(tmp_path):
    p = tmp_path / "m.txt"
    p.write_text("x", encoding="utf-8")
    stamp = FileService().modified_at(p)
    assert stamp.year >= 2000


def test_file_service_write_atomic_open_fail(monkeypatch, tmp_path):
    class FakeQSaveFile:
        def __init__(self, *_):
            pass

        def open(self, *_):
            return False

    monkeypatch.setattr("pypad.services.file_service.QSaveFile", FakeQSaveFile, raising=True)
    with pytest.raises(OSError):
        FileService().write_text_atomic(tmp_path / "x.md", "data")


def test_file_service_write_atomic_commit_fail(monkeypatch, tmp_path):
    class FakeQSaveFile:
        def __init__(self, *_):
            self._data = b""

        def open(self, *_):
            return True

        def write(self, b):
            self._data += b

        def commit(self):
            return False

    p = tmp_path / "x.md"
    monkeypatch.setattr("pypad.services.file_service.QSaveFile", FakeQSaveFile, raising=True)
    with pytest.raises(OSError):
        FileService().write_text_atomic(p, "data")
    assert not p.exists()
