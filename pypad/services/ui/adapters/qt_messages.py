from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from pypad.services.ui.ports.messages import CloseChoice, IMessageService


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)

    def confirm_close(self, parent: Any | None, title: str, text: str) -> CloseChoice:
        box = QMessageBox(parent)
        box.setIcon(QMessageBox.Icon.Warning)
        box.setWindowTitle(title)
        box.setText(title)
        box.setInformativeText(text)

        save = box.addButton("Save", QMessageBox.ButtonRole.AcceptRole)
        save_as = box.addButton("Save As…", QMessageBox.ButtonRole.ActionRole)
        discard = box.addButton("Discard", QMessageBox.ButtonRole.DestructiveRole)
        cancel = box.addButton("Cancel", QMessageBox.ButtonRole.RejectRole)
        box.setDefaultButton(save)
        box.setEscapeButton(cancel)

        box.exec()
        clicked = box.clickedButton()
        if clicked == save:
            return CloseChoice.SAVE
        if clicked == save_as:
            return CloseChoice.SAVE_AS
        if clicked == discard:
            return CloseChoice.DISCARD
        return CloseChoice.CANCEL
