from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pypad.utils.constants import HTML_EXTENSIONS, MARKDOWN_EXTENSIONS, UNTITLED


@dataclass(eq=False)
class Document:
    """
    One editable file: its text, where it lives on disk, and whether the text
    differs from what was last persisted there.

    A plain mutable record owned by exactly one window. `location is None`
    means the document has never been saved.
    """

    text: str = ""
    location: Path | None = None
    is_dirty: bool = False

    @classmethod
    def untitled(cls) -> Document:
        return cls()

    @classmethod
    def loaded(cls, path: Path, text: str) -> Document:
        doc = cls()
        doc.set_text(text)
        doc.bind_location(path)
        return doc

    def set_text(self, new_text: str) -> None:
        self.text = new_text
        self.is_dirty = True

    def bind_location(self, path: Path) -> None:
        """Record a completed open/save of `text` at `path`."""
        self.location = Path(path)
        self.is_dirty = False

    # ---------- derived ----------
    @property
    def display_name(self) -> str:
        return self.location.name if self.location else UNTITLED

    @property
    def extension(self) -> str:
        if self.location is None:
            return ""
        return self.location.suffix.lstrip(".").lower()

    @property
    def kind(self) -> str:
        ext = self.extension
        if ext in MARKDOWN_EXTENSIONS:
            return "markdown"
        if ext in HTML_EXTENSIONS:
            return "html"
        return "text"
