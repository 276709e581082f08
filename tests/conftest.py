from __future__ import annotations

import os
import weakref
from pathlib import Path

# Headless Qt for CI; must be set before the first Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from pypad.services.file_service import FileService
from pypad.services.lifecycle.controller import WindowLifecycleController
from pypad.services.lifecycle.placement import Rect
from pypad.services.markdown_renderer import MarkdownRenderer
from pypad.services.settings_service import SettingsService
from pypad.services.ui.ports.messages import CloseChoice

SCREEN = Rect(0, 0, 1920, 1080)


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Fakes for the UI ports ---


class FakeMessages:
    """Records every message; answers the close prompt with `choice`."""

    def __init__(self, choice: CloseChoice = CloseChoice.CANCEL) -> None:
        self.choice = choice
        self.prompts = 0
        self.errors: list[tuple[str, str]] = []

    def error(self, parent, title, text):
        self.errors.append((title, text))

    def confirm_close(self, parent, title, text):
        self.prompts += 1
        return self.choice


class FakeDialogs:
    """Returns preset paths; None means the user cancelled the picker."""

    def __init__(self) -> None:
        self.open_path: Path | None = None
        self.save_path: Path | None = None
        self.open_calls = 0
        self.save_calls: list[str | None] = []

    def get_open_file(self, parent, caption, start_dir, filter_str):
        self.open_calls += 1
        return self.open_path

    def get_save_file(self, parent, caption, start_path, filter_str):
        self.save_calls.append(start_path)
        return self.save_path


class FailingFileService(FileService):
    def write_text_atomic(self, path: Path, text: str) -> None:
        raise OSError("disk full")


class FakeWindow:
    """In-memory stand-in for DocumentWindow that honours the same close contract."""

    def __init__(self, document, commands) -> None:
        self.document = document
        self.commands = commands
        self._guard_ref = None
        self.title: str | None = None
        self.dirty: bool | None = None
        self.recents: list[str] = []
        self.size = None
        self.min_size = None
        self.pos = (0, 0)
        self.shown = False
        self.is_open = True

    def attach_close_guard(self, guard):
        self._guard_ref = weakref.ref(guard)

    def close_guard(self):
        return self._guard_ref() if self._guard_ref is not None else None

    def set_chrome(self, title, dirty):
        self.title = title
        self.dirty = dirty

    def set_recent_files(self, items):
        self.recents = list(items)

    def apply_size(self, size, min_size):
        self.size = size
        self.min_size = min_size

    def move_to(self, x, y):
        self.pos = (x, y)

    def origin(self):
        return self.pos

    def show_window(self):
        self.shown = True

    def request_close(self):
        guard = self.close_guard()
        if guard is not None and not guard.request_close(self):
            return False
        self.is_open = False
        self.commands.window_closed(self)
        return True

    def type_text(self, text: str) -> None:
        self.document.set_text(text)
        self.commands.document_edited(self)


class KeyWindow:
    """Callable standing in for QApplication.activeWindow."""

    def __init__(self) -> None:
        self.current = None

    def __call__(self):
        return self.current


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def key_window() -> KeyWindow:
    return KeyWindow()


@pytest.fixture()
def controller(file_service, dialogs, messages, settings_service, key_window):
    """Controller over FakeWindow instances on a fixed 1920x1080 screen."""
    return WindowLifecycleController(
        window_factory=FakeWindow,
        files=file_service,
        dialogs=dialogs,
        messages=messages,
        settings=settings_service,
        key_window=key_window,
        screen_geometry=lambda: SCREEN,
    )
