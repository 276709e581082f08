from __future__ import annotations

import logging
from enum import Enum, auto
from pathlib import Path
from typing import Any, Callable

from pypad.domain.interfaces import IFileService
from pypad.domain.models import Document
from pypad.services.ui.ports.dialogs import IFileDialogService
from pypad.services.ui.ports.messages import CloseChoice, IMessageService
from pypad.utils.constants import SAVE_AS_DEFAULT_NAME, SAVE_FILTER

_LOGGER = logging.getLogger(__name__)

UNSAVED_TITLE = "Unsaved Changes"
UNSAVED_TEXT = "You have unsaved changes. Do you want to save, save as, or discard them?"


class CloseState(Enum):
    IDLE = auto()
    CONFIRMING_CLOSE = auto()
    ALLOWED = auto()
    BLOCKED = auto()


class CloseGuard:
    """
    Close-intercept handler for one document window.

    `request_close()` runs the unsaved-changes state machine for a single close
    attempt and returns whether the window may close:

        IDLE --clean--> ALLOWED
        IDLE --dirty--> CONFIRMING_CLOSE --Save/Save As ok, Discard--> ALLOWED
                                         --Cancel, picker cancelled, I/O error--> BLOCKED

    BLOCKED ends the attempt and the guard goes back to IDLE. ALLOWED is final
    for the attempt, the window is about to go away. The terminal state of the
    latest attempt stays readable as `last_outcome`.

    The same Save / Save As flows back the File menu commands, so a guard is
    also how the controller saves the document of the key window.
    """

    def __init__(
        self,
        document: Document,
        *,
        files: IFileService,
        dialogs: IFileDialogService,
        messages: IMessageService,
        on_saved: Callable[[Document], None] | None = None,
    ) -> None:
        self.document = document
        self._files = files
        self._dialogs = dialogs
        self._messages = messages
        self._on_saved = on_saved
        self.state = CloseState.IDLE
        self.last_outcome: CloseState | None = None

    # ---------- close attempt ----------
    def request_close(self, parent: Any | None = None) -> bool:
        if self.state is CloseState.CONFIRMING_CLOSE:
            # The prompt for this window is still open; a second attempt must not start.
            _LOGGER.warning("Close already being confirmed for %s", self.document.display_name)
            return False

        if not self.document.is_dirty:
            return self._finish(CloseState.ALLOWED)

        self.state = CloseState.CONFIRMING_CLOSE
        try:
            choice = self._messages.confirm_close(parent, UNSAVED_TITLE, UNSAVED_TEXT)
            ok = self._resolve(choice, parent)
        except BaseException:
            self.state = CloseState.IDLE
            raise
        return self._finish(CloseState.ALLOWED if ok else CloseState.BLOCKED)

    def _resolve(self, choice: CloseChoice, parent: Any | None) -> bool:
        _LOGGER.debug("Close prompt for %s answered %s", self.document.display_name, choice.name)
        if choice is CloseChoice.SAVE:
            return self.save(parent)
        if choice is CloseChoice.SAVE_AS:
            return self.save_as(parent)
        if choice is CloseChoice.DISCARD:
            return True
        return False

    def _finish(self, outcome: CloseState) -> bool:
        self.last_outcome = outcome
        # BLOCKED leaves the window open; the next attempt starts from scratch.
        self.state = CloseState.ALLOWED if outcome is CloseState.ALLOWED else CloseState.IDLE
        return outcome is CloseState.ALLOWED

    # ---------- save flows ----------
    def save(self, parent: Any | None = None) -> bool:
        """Write to the bound location; without one this is Save As."""
        location = self.document.location
        if location is None:
            return self.save_as(parent)
        return self._write(location, parent)

    def save_as(self, parent: Any | None = None) -> bool:
        """Always ask for a destination; on success the document is rebound to it."""
        location = self.document.location
        suggested = str(location) if location else SAVE_AS_DEFAULT_NAME
        dest = self._dialogs.get_save_file(parent, "Save As", suggested, SAVE_FILTER)
        if dest is None:
            _LOGGER.debug("Save As cancelled for %s", self.document.display_name)
            return False
        return self._write(Path(dest), parent)

    def _write(self, path: Path, parent: Any | None) -> bool:
        try:
            self._files.write_text_atomic(path, self.document.text)
        except OSError as e:
            _LOGGER.warning("Failed to save %s: %s", path, e)
            self._messages.error(parent, "Save Error", f"Failed to save file:\n{e}")
            return False
        self.document.bind_location(path)
        _LOGGER.info("Saved %s", path)
        if self._on_saved is not None:
            self._on_saved(self.document)
        return True
