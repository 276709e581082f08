from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable


class IMarkdownRenderer(Protocol):
    """Convert document text to a full HTML string (including CSS) for the preview."""

    def to_html(self, markdown_text: str) -> str: ...
    def preview_html(self, text: str, kind: str) -> str: ...


class IFileService(Protocol):
    """Read/write whole UTF-8 text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...
    def modified_at(self, path: Path) -> datetime: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_recent(self) -> list[str]: ...
    def set_recent(self, recent: Iterable[str]) -> None: ...
    def add_recent(self, path: Path) -> list[str]: ...
    def get_preview_visible(self) -> bool: ...
    def set_preview_visible(self, visible: bool) -> None: ...


@runtime_checkable
class IConfigService(Protocol):
    """Read-only access to INI configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...
