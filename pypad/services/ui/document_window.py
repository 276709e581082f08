from __future__ import annotations

import logging
import weakref
from pathlib import Path

from PyQt6 import sip
from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QMenu,
    QSplitter,
    QStatusBar,
    QTextBrowser,
    QTextEdit,
)

from pypad.domain.interfaces import IFileService, IMarkdownRenderer, ISettingsService
from pypad.domain.models import Document
from pypad.services.lifecycle.close_guard import CloseGuard
from pypad.services.lifecycle.controller import IFileCommands
from pypad.services.status_format import kind_label, last_edited_label, name_label
from pypad.utils.constants import APP_NAME, MAX_RECENTS

_LOGGER = logging.getLogger(__name__)


class DocumentWindow(QMainWindow):
    """
    One top-level window bound to one Document for its whole life.

    The window only references its close guard weakly; the controller's
    registry owns it. Menus and drops route to the injected commands.
    """

    closed = pyqtSignal(object)
    edited = pyqtSignal(object)

    def __init__(
        self,
        document: Document,
        commands: IFileCommands,
        *,
        renderer: IMarkdownRenderer,
        file_service: IFileService,
        settings: ISettingsService | None = None,
    ) -> None:
        super().__init__()
        # Qt deletes the window once it has closed; Python must not delete it from under a close event
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose, True)
        sip.transferto(self, None)

        self.document = document
        self.commands = commands
        self.renderer = renderer
        self.file_service = file_service
        self.settings = settings
        self._guard_ref: weakref.ReferenceType[CloseGuard] | None = None
        # Per-window; the stored setting only seeds windows opened later
        self._preview_visible = settings.get_preview_visible() if settings is not None else True
        # Last-edited text is stat'ed on open, save and rebind, never per keystroke
        self._edited_text = ""
        self._stamped_location: Path | None = None
        self._stamped_clean = False

        # Widgets
        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.editor.setLineWrapMode(QTextEdit.LineWrapMode.WidgetWidth)
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))
        # File drops go to the window, which opens each file in its own window
        self.editor.setAcceptDrops(False)

        self.preview = QTextBrowser(self)
        self.preview.setOpenExternalLinks(True)

        self.splitter = QSplitter(self)
        self.splitter.setOrientation(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(self.preview)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)
        self.setCentralWidget(self.splitter)

        # Status bar: last edited | name | kind + count
        self.lbl_edited = QLabel(self)
        self.lbl_name = QLabel(self)
        self.lbl_kind = QLabel(self)
        sb = QStatusBar(self)
        sb.addWidget(self.lbl_edited, 1)
        sb.addWidget(self.lbl_name, 1)
        sb.addPermanentWidget(self.lbl_kind)
        self.setStatusBar(sb)

        # Debounced preview; the status bar updates on every keystroke
        self._debounce = QTimer(self)
        self._debounce.setInterval(150)
        self._debounce.setSingleShot(True)
        self._debounce.timeout.connect(self._render_preview)

        self._build_actions()
        self._build_menu()

        # Populate without marking the document dirty
        self.editor.blockSignals(True)
        self.editor.setPlainText(document.text)
        self.editor.blockSignals(False)
        self.editor.textChanged.connect(self._on_text_changed)

        self.edited.connect(self.commands.document_edited)
        self.closed.connect(self.commands.window_closed)

        self._apply_preview_visibility()
        self._render_preview()
        self._refresh_status()

        self.setAcceptDrops(True)

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_new = QAction(
            "New File",
            self,
            shortcut=QKeySequence.StandardKey.New,
            triggered=lambda: self.commands.new_document(),
        )
        self.act_open = QAction(
            "Open File…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=lambda: self.commands.open_document(parent=self),
        )
        self.act_save = QAction(
            "Save File",
            self,
            shortcut=QKeySequence.StandardKey.Save,
            triggered=lambda: self.commands.save_key_window_document(),
        )
        self.act_save_as = QAction(
            "Save As…",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=lambda: self.commands.save_key_window_document_as(),
        )
        self.act_close = QAction(
            "Close", self, shortcut=QKeySequence.StandardKey.Close, triggered=self.close
        )
        self.act_quit = QAction(
            "Quit", self, shortcut=QKeySequence.StandardKey.Quit, triggered=self._quit
        )
        self.act_toggle_preview = QAction(
            "Toggle Preview",
            self,
            checkable=True,
            checked=True,
            triggered=self._toggle_preview,
        )
        self.act_about = QAction(
            f"About {APP_NAME}", self, triggered=lambda: self.commands.show_about(self)
        )
        self.recent_menu = QMenu("Open Recent", self)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addMenu(self.recent_menu)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_close)
        filem.addAction(self.act_quit)

        viewm = m.addMenu("&View")
        viewm.addAction(self.act_toggle_preview)

        helpm = m.addMenu("&Help")
        helpm.addAction(self.act_about)

    # ---------- IDocumentWindow ----------
    def attach_close_guard(self, guard: CloseGuard) -> None:
        self._guard_ref = weakref.ref(guard)

    def close_guard(self) -> CloseGuard | None:
        return self._guard_ref() if self._guard_ref is not None else None

    def set_chrome(self, title: str, dirty: bool) -> None:
        # "[*]" is where Qt draws the unsaved-changes marker
        self.setWindowTitle(f"{title}[*]")
        self.setWindowModified(dirty)
        self._apply_preview_visibility()
        self._refresh_status()
        self._debounce.start()

    def set_recent_files(self, items: list[str]) -> None:
        self.recent_menu.clear()
        if not items:
            na = QAction("(empty)", self)
            na.setEnabled(False)
            self.recent_menu.addAction(na)
            return
        for p in items[:MAX_RECENTS]:
            self.recent_menu.addAction(
                QAction(
                    p,
                    self,
                    triggered=lambda chk=False, x=p: self.commands.open_document(Path(x), self),
                )
            )

    def apply_size(self, size: tuple[int, int], min_size: tuple[int, int]) -> None:
        self.setMinimumSize(*min_size)
        self.resize(*size)

    def move_to(self, x: int, y: int) -> None:
        self.move(x, y)

    def origin(self) -> tuple[int, int]:
        p = self.pos()
        return p.x(), p.y()

    def show_window(self) -> None:
        self.show()
        self.raise_()
        self.activateWindow()

    def request_close(self) -> bool:
        return self.close()

    # ---------- Actions ----------
    def _quit(self):
        if self.commands.close_all():
            QApplication.quit()

    def _toggle_preview(self, on: bool):
        self._preview_visible = on
        if self.settings is not None:
            self.settings.set_preview_visible(on)
        self._apply_preview_visibility()

    # ---------- Helpers ----------
    def _has_preview(self) -> bool:
        return self.document.kind in ("markdown", "html")

    def _apply_preview_visibility(self):
        self.act_toggle_preview.setEnabled(self._has_preview())
        self.act_toggle_preview.setChecked(self._preview_visible)
        self.preview.setVisible(self._has_preview() and self._preview_visible)

    def _render_preview(self):
        if not self._has_preview():
            return
        self.preview.setHtml(self.renderer.preview_html(self.document.text, self.document.kind))

    def _refresh_status(self):
        doc = self.document
        clean = not doc.is_dirty
        rebound = doc.location != self._stamped_location
        if not self._edited_text or rebound or (clean and not self._stamped_clean):
            self._edited_text = last_edited_label(doc, self.file_service)
            self._stamped_location = doc.location
        self._stamped_clean = clean
        self.lbl_edited.setText(f"Last edited: {self._edited_text}")
        self.lbl_name.setText(name_label(doc))
        self.lbl_kind.setText(kind_label(self.document))

    def _on_text_changed(self):
        self.document.set_text(self.editor.toPlainText())
        self.edited.emit(self)
        self._debounce.start()

    # ---------- DnD ----------
    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        paths = [Path(u.toLocalFile()) for u in e.mimeData().urls() if u.isLocalFile()]
        if paths:
            e.acceptProposedAction()
            self.commands.open_paths(paths)

    # ---------- Close ----------
    def closeEvent(self, event):
        guard = self.close_guard()
        if guard is not None and not guard.request_close(self):
            _LOGGER.debug("Close refused for %s", self.document.display_name)
            event.ignore()
            return
        event.accept()
        self.closed.emit(self)
