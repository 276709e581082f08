from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Callable, Protocol, runtime_checkable

from pypad.domain.interfaces import IFileService, ISettingsService
from pypad.domain.models import Document
from pypad.services.config.window_config import WindowConfig
from pypad.services.lifecycle.close_guard import CloseGuard
from pypad.services.lifecycle.placement import CascadePlacer, Rect
from pypad.services.lifecycle.registry import WindowRegistry
from pypad.services.ui.ports.dialogs import IFileDialogService
from pypad.services.ui.ports.messages import IMessageService
from pypad.utils.constants import OPEN_FILTER

_LOGGER = logging.getLogger(__name__)


@runtime_checkable
class IDocumentWindow(Protocol):
    """What the controller needs from a window (implemented by the Qt DocumentWindow)."""

    document: Document

    def attach_close_guard(self, guard: CloseGuard) -> None: ...
    def set_chrome(self, title: str, dirty: bool) -> None: ...
    def set_recent_files(self, items: list[str]) -> None: ...
    def apply_size(self, size: tuple[int, int], min_size: tuple[int, int]) -> None: ...
    def move_to(self, x: int, y: int) -> None: ...
    def origin(self) -> tuple[int, int]: ...
    def show_window(self) -> None: ...
    def request_close(self) -> bool: ...


class IFileCommands(Protocol):
    """Commands a window's menus and events route back to."""

    def new_document(self) -> IDocumentWindow: ...
    def open_document(self, path: Path | None = None, parent: Any | None = None) -> IDocumentWindow | None: ...
    def open_paths(self, paths: Iterable[Path]) -> list[IDocumentWindow]: ...
    def save_key_window_document(self) -> bool: ...
    def save_key_window_document_as(self) -> bool: ...
    def close_all(self) -> bool: ...
    def show_about(self, parent: Any | None = None) -> None: ...
    def recent_files(self) -> list[str]: ...
    def document_edited(self, window: IDocumentWindow) -> None: ...
    def window_closed(self, window: IDocumentWindow) -> None: ...


WindowFactory = Callable[[Document, IFileCommands], IDocumentWindow]


def _qt_key_window() -> Any | None:
    from PyQt6.QtWidgets import QApplication

    return QApplication.activeWindow()


def _qt_screen_geometry() -> Rect:
    from PyQt6.QtGui import QGuiApplication

    screen = QGuiApplication.primaryScreen()
    if screen is None:
        return Rect(0, 0, 1280, 800)
    g = screen.availableGeometry()
    return Rect(g.x(), g.y(), g.width(), g.height())


class WindowLifecycleController(IFileCommands):
    """
    Creates document windows and keeps them wired to their documents.

    Every window gets a CloseGuard that the registry owns until the window
    reports it has closed. Save / Save As always act on the document of the
    focused window.
    """

    def __init__(
        self,
        *,
        window_factory: WindowFactory,
        files: IFileService,
        dialogs: IFileDialogService,
        messages: IMessageService,
        settings: ISettingsService | None = None,
        registry: WindowRegistry[CloseGuard] | None = None,
        window_config: WindowConfig | None = None,
        key_window: Callable[[], Any | None] = _qt_key_window,
        screen_geometry: Callable[[], Rect] = _qt_screen_geometry,
        about: Callable[[Any | None], None] | None = None,
    ) -> None:
        self._factory = window_factory
        self._files = files
        self._dialogs = dialogs
        self._messages = messages
        self._settings = settings
        self.registry: WindowRegistry[CloseGuard] = (
            registry if registry is not None else WindowRegistry()
        )
        self._config = window_config or WindowConfig()
        self._key_window = key_window
        self._screen_geometry = screen_geometry
        self._about = about
        self.placer = CascadePlacer(self._config.cascade_x, self._config.cascade_y)

    # ---------- window creation ----------
    def create_window(self, document: Document) -> IDocumentWindow:
        window = self._factory(document, self)

        size = (self._config.width, self._config.height)
        window.apply_size(size, (self._config.min_width, self._config.min_height))
        x, y = self.placer.next_origin(size, self._screen_geometry())
        window.move_to(x, y)
        self.placer.remember(window.origin())

        guard = CloseGuard(
            document,
            files=self._files,
            dialogs=self._dialogs,
            messages=self._messages,
            on_saved=lambda _doc, w=window: self._document_saved(w),
        )
        # Registry holds the only strong reference; it must exist before the window can close.
        self.registry.register(window, guard)
        window.attach_close_guard(guard)

        window.set_recent_files(self.recent_files())
        self.refresh_chrome(window)
        window.show_window()
        _LOGGER.info("Opened window for %s at %s", document.display_name, window.origin())
        return window

    def refresh_chrome(self, window: IDocumentWindow) -> None:
        doc = window.document
        window.set_chrome(doc.display_name, doc.is_dirty)

    # ---------- File menu ----------
    def new_document(self) -> IDocumentWindow:
        return self.create_window(Document.untitled())

    def open_document(
        self, path: Path | None = None, parent: Any | None = None
    ) -> IDocumentWindow | None:
        if path is None:
            path = self._dialogs.get_open_file(parent, "Open File", None, OPEN_FILTER)
            if path is None:
                return None
        path = Path(path)
        try:
            text = self._files.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            _LOGGER.warning("Failed to open %s: %s", path, e)
            self._messages.error(parent, "Open Error", f"Failed to open file:\n{e}")
            return None

        window = self.create_window(Document.loaded(path, text))
        self._remember_recent(path)
        return window

    def open_paths(self, paths: Iterable[Path]) -> list[IDocumentWindow]:
        opened: list[IDocumentWindow] = []
        for p in paths:
            window = self.open_document(Path(p))
            if window is not None:
                opened.append(window)
        return opened

    def save_key_window_document(self) -> bool:
        resolved = self._resolve_key_window()
        if resolved is None:
            return False
        window, guard = resolved
        return guard.save(window)

    def save_key_window_document_as(self) -> bool:
        resolved = self._resolve_key_window()
        if resolved is None:
            return False
        window, guard = resolved
        return guard.save_as(window)

    def close_all(self) -> bool:
        """Ask every window to close; stops at the first one that refuses."""
        for window in self.registry.windows():
            if not window.request_close():
                return False
        return True

    def show_about(self, parent: Any | None = None) -> None:
        if self._about is not None:
            self._about(parent)

    def recent_files(self) -> list[str]:
        return self._settings.get_recent() if self._settings is not None else []

    # ---------- window notifications ----------
    def document_edited(self, window: IDocumentWindow) -> None:
        self.refresh_chrome(window)

    def window_closed(self, window: IDocumentWindow) -> None:
        if self.registry.unregister(window) is not None:
            _LOGGER.info("Closed window for %s", window.document.display_name)

    # ---------- internals ----------
    def _resolve_key_window(self) -> tuple[Any, CloseGuard] | None:
        window = self._key_window()
        if window is None:
            _LOGGER.warning("Save requested with no focused window")
            return None
        guard = self.registry.handler_for(window)
        if guard is None:
            _LOGGER.warning("Save requested but the focused window is not a document window")
            return None
        return window, guard

    def _document_saved(self, window: IDocumentWindow) -> None:
        self.refresh_chrome(window)
        if window.document.location is not None:
            self._remember_recent(window.document.location)

    def _remember_recent(self, path: Path) -> None:
        if self._settings is None:
            return
        recents = self._settings.add_recent(path)
        for w in self.registry.windows():
            w.set_recent_files(recents)
