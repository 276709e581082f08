from __future__ import annotations

from pathlib import Path

import pytest

from pypad.domain.models import Document
from pypad.services.lifecycle.controller import WindowLifecycleController
from pypad.services.ui.document_window import DocumentWindow
from pypad.services.ui.ports.messages import CloseChoice

from conftest import SCREEN

# ------------------------------
# Fixtures
# ------------------------------


@pytest.fixture()
def qt_controller(qapp, renderer, file_service, settings_service, dialogs, messages, key_window):
    """Controller that builds real DocumentWindows; the key window is set by each test."""

    def factory(document, commands):
        return DocumentWindow(
            document,
            commands,
            renderer=renderer,
            file_service=file_service,
            settings=settings_service,
        )

    ctrl = WindowLifecycleController(
        window_factory=factory,
        files=file_service,
        dialogs=dialogs,
        messages=messages,
        settings=settings_service,
        key_window=key_window,
        screen_geometry=lambda: SCREEN,
    )
    yield ctrl
    # Leave nothing open for the next test
    messages.choice = CloseChoice.DISCARD
    ctrl.close_all()
    qapp.processEvents()


def _file(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# ------------------------------
# Window behaviour
# ------------------------------


def test_new_window_initial_state(qt_controller):
    w = qt_controller.new_document()
    assert isinstance(w, DocumentWindow)
    assert w.windowTitle() == "Untitled[*]"
    assert w.isWindowModified() is False
    assert w.document.is_dirty is False
    assert w.editor.toPlainText() == ""
    assert w.isVisible() is True
    # plain text documents have no preview
    assert w.preview.isVisible() is False
    assert w.act_toggle_preview.isEnabled() is False


def test_loading_does_not_mark_dirty(qt_controller, tmp_path):
    w = qt_controller.open_document(_file(tmp_path / "b.txt", "x"))
    assert w.editor.toPlainText() == "x"
    assert w.document.is_dirty is False
    assert w.windowTitle() == "b.txt[*]"
    assert w.isWindowModified() is False


def test_typing_marks_dirty_and_updates_chrome(qt_controller, tmp_path):
    w = qt_controller.open_document(_file(tmp_path / "c.txt", "abc"))
    w.editor.setPlainText("abcd")
    assert w.document.text == "abcd"
    assert w.document.is_dirty is True
    assert w.isWindowModified() is True
    assert w.lbl_name.text() == "c.txt *"
    assert w.lbl_kind.text() == "TXT | 4 c"


def test_markdown_window_shows_preview(qt_controller, qtbot, tmp_path):
    w = qt_controller.open_document(_file(tmp_path / "n.md", "# Heading"))
    assert w.preview.isVisible() is True
    assert "Heading" in w.preview.toPlainText()
    assert w.lbl_kind.text().startswith("Markdown")

    w.editor.setPlainText("# Changed")
    qtbot.waitUntil(lambda: "Changed" in w.preview.toPlainText(), timeout=2000)


def test_toggle_preview_is_remembered(qt_controller, settings_service, tmp_path):
    w = qt_controller.open_document(_file(tmp_path / "t.md", "text"))
    w.act_toggle_preview.trigger()
    assert w.preview.isVisible() is False
    assert settings_service.get_preview_visible() is False

    other = qt_controller.open_document(_file(tmp_path / "u.md", "more"))
    assert other.preview.isVisible() is False


def test_toggle_preview_leaves_other_open_windows_alone(qt_controller, tmp_path):
    a = qt_controller.open_document(_file(tmp_path / "a.md", "alpha"))
    b = qt_controller.open_document(_file(tmp_path / "b.md", "beta"))
    a.act_toggle_preview.trigger()
    assert a.preview.isVisible() is False
    assert b.preview.isVisible() is True

    b.editor.setPlainText("beta edited")
    assert b.preview.isVisible() is True
    assert b.act_toggle_preview.isChecked() is True

    a.editor.setPlainText("alpha edited")
    assert a.preview.isVisible() is False


def test_typing_does_not_stat_the_file(qt_controller, file_service, key_window, monkeypatch, tmp_path):
    calls = []
    real = file_service.modified_at

    def counting(path):
        calls.append(path)
        return real(path)

    monkeypatch.setattr(file_service, "modified_at", counting)
    p = _file(tmp_path / "k.txt", "one")
    w = qt_controller.open_document(p)
    assert len(calls) == 1
    assert w.lbl_edited.text() == "Last edited: Today"

    for text in ("o", "on", "one!", "one!!"):
        w.editor.setPlainText(text)
    assert len(calls) == 1

    key_window.current = w
    w.act_save.trigger()
    assert len(calls) == 2

    w.editor.setPlainText("again")
    assert len(calls) == 2


def test_save_as_restamps_last_edited(qt_controller, file_service, key_window, dialogs, monkeypatch, tmp_path):
    calls = []
    real = file_service.modified_at

    def counting(path):
        calls.append(path)
        return real(path)

    monkeypatch.setattr(file_service, "modified_at", counting)
    w = qt_controller.new_document()
    w.editor.setPlainText("fresh")
    assert calls == []

    key_window.current = w
    dialogs.save_path = tmp_path / "fresh.txt"
    w.act_save_as.trigger()
    assert calls == [tmp_path / "fresh.txt"]
    assert w.lbl_edited.text() == "Last edited: Today"


def test_save_via_menu_action_uses_key_window(qt_controller, key_window, tmp_path):
    p = _file(tmp_path / "s.txt", "one")
    w = qt_controller.open_document(p)
    w.editor.setPlainText("two")
    key_window.current = w
    w.act_save.trigger()
    assert p.read_text(encoding="utf-8") == "two"
    assert w.document.is_dirty is False
    assert w.isWindowModified() is False


def test_save_as_updates_title_and_recents(qt_controller, key_window, dialogs, tmp_path):
    w = qt_controller.new_document()
    w.editor.setPlainText("# new")
    key_window.current = w
    dialogs.save_path = tmp_path / "doc.md"
    w.act_save_as.trigger()
    assert w.windowTitle() == "doc.md[*]"
    assert w.document.kind == "markdown"
    assert w.preview.isVisible() is True
    texts = [a.text() for a in w.recent_menu.actions()]
    assert str(tmp_path / "doc.md") in texts


# ------------------------------
# Close interception
# ------------------------------


def test_close_clean_window_unregisters(qt_controller, qapp, messages):
    w = qt_controller.new_document()
    assert w.close() is True
    qapp.processEvents()
    assert messages.prompts == 0
    assert len(qt_controller.registry) == 0


def test_close_cancel_keeps_window_open(qt_controller, messages):
    w = qt_controller.new_document()
    w.editor.setPlainText("unsaved")
    messages.choice = CloseChoice.CANCEL
    assert w.close() is False
    assert w.isVisible() is True
    assert w in qt_controller.registry
    assert w.document.is_dirty is True


def test_close_discard_leaves_file_untouched(qt_controller, messages, tmp_path):
    p = _file(tmp_path / "a.txt", "hello")
    w = qt_controller.open_document(p)
    w.editor.setPlainText("hello!")
    messages.choice = CloseChoice.DISCARD
    assert w.close() is True
    assert p.read_text(encoding="utf-8") == "hello"
    assert len(qt_controller.registry) == 0


def test_close_save_writes_then_closes(qt_controller, messages, tmp_path):
    p = _file(tmp_path / "a.txt", "hello")
    w = qt_controller.open_document(p)
    w.editor.setPlainText("saved on close")
    messages.choice = CloseChoice.SAVE
    assert w.close() is True
    assert p.read_text(encoding="utf-8") == "saved on close"


def test_window_without_guard_closes_freely(qapp, renderer, file_service):
    class Commands:
        closed = []

        def document_edited(self, w):
            pass

        def window_closed(self, w):
            self.closed.append(w)

    cmds = Commands()
    w = DocumentWindow(Document.untitled(), cmds, renderer=renderer, file_service=file_service)
    w.show()
    w.editor.setPlainText("dirty but unguarded")
    assert w.close() is True
    assert cmds.closed == [w]
