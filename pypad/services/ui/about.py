# pypad/services/ui/about.py
from __future__ import annotations

from PyQt6.QtWidgets import (
    QDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
)

from pypad.utils.constants import APP_NAME


class AboutDialog(QDialog):
    def __init__(self, version: str = "0.0.0", parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"About {APP_NAME}")
        self.setModal(False)

        self.close_btn = QPushButton("OK")

        name_label = QLabel(APP_NAME)
        version_label = QLabel(f"Version {version}")
        blurb_label = QLabel("A minimalist editor for plain text, Markdown and HTML.")
        blurb_label.setWordWrap(True)

        form = QGridLayout()
        form.addWidget(name_label, 0, 0)
        form.addWidget(version_label, 1, 0)
        form.addWidget(blurb_label, 2, 0)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.close_btn)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addLayout(buttons)

        self.close_btn.clicked.connect(self.close)
