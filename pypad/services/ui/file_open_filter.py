from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QEvent, QObject

from pypad.services.lifecycle.controller import IFileCommands

_LOGGER = logging.getLogger(__name__)


class FileOpenEventFilter(QObject):
    """
    Application-level filter for the system "open with" / dock-drop request.

    Each QFileOpenEvent becomes a new document window, exactly like File > Open.
    """

    def __init__(self, commands: IFileCommands, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._commands = commands

    def eventFilter(self, obj, event):  # noqa: N802 (Qt API)
        if event.type() == QEvent.Type.FileOpen:
            local = event.file()
            if local:
                _LOGGER.info("System asked to open %s", local)
                self._commands.open_paths([Path(local)])
            return True
        return super().eventFilter(obj, event)
