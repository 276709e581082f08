from __future__ import annotations

from datetime import datetime
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from pypad.domain.interfaces import IFileService


class FileService(IFileService):
    """Whole-file UTF-8 reads and atomic writes."""

    def read_text(self, path: Path) -> str:
        # Strict decoding: a binary file surfaces as UnicodeDecodeError, not mojibake.
        return Path(path).read_text(encoding="utf-8")

    def write_text_atomic(self, path: Path, text: str) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")

    def modified_at(self, path: Path) -> datetime:
        return datetime.fromtimestamp(Path(path).stat().st_mtime)
