from __future__ import annotations

from pathlib import Path
from typing import Iterable

from PyQt6.QtCore import QSettings

from pypad.domain.interfaces import ISettingsService
from pypad.utils.constants import MAX_RECENTS, SETTINGS_PREVIEW_VISIBLE, SETTINGS_RECENTS


class SettingsService(ISettingsService):
    """Persist small UI bits: recent files and whether the preview pane is shown."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_recent(self) -> list[str]:
        v = self._s.value(SETTINGS_RECENTS, [])
        if isinstance(v, str):
            # INI backends collapse a one-element list to a bare string
            return [v] if v else []
        return [str(x) for x in v] if isinstance(v, list) else []

    def set_recent(self, recent: Iterable[str]) -> None:
        self._s.setValue(SETTINGS_RECENTS, list(recent)[:MAX_RECENTS])

    def add_recent(self, path: Path) -> list[str]:
        """Move `path` to the front of the recent list and return the new list."""
        s = str(path)
        recents = [r for r in self.get_recent() if r != s]
        recents.insert(0, s)
        recents = recents[:MAX_RECENTS]
        self.set_recent(recents)
        return recents

    def get_preview_visible(self) -> bool:
        v = self._s.value(SETTINGS_PREVIEW_VISIBLE, True)
        if isinstance(v, str):
            return v.strip().lower() in {"1", "true", "yes", "on"}
        return bool(v)

    def set_preview_visible(self, visible: bool) -> None:
        self._s.setValue(SETTINGS_PREVIEW_VISIBLE, bool(visible))
