from pathlib import Path

from PyQt6.QtCore import QSettings

from pypad.services.settings_service import SettingsService
from pypad.utils.constants import MAX_RECENTS


def test_settings_recents(settings_service: SettingsService):
    assert settings_service.get_recent() == []  # default
    r = ["a.md", "b.md"]
    settings_service.set_recent(r)
    assert settings_service.get_recent() == r


def test_add_recent_moves_to_front_and_dedupes(settings_service: SettingsService):
    settings_service.set_recent(["a.md", "b.md", "c.md"])
    got = settings_service.add_recent(Path("c.md"))
    assert got == ["c.md", "a.md", "b.md"]
    assert settings_service.get_recent() == got


def test_add_recent_caps_length(settings_service: SettingsService):
    for i in range(MAX_RECENTS + 3):
        settings_service.add_recent(Path(f"f{i}.txt"))
    recents = settings_service.get_recent()
    assert len(recents) == MAX_RECENTS
    assert recents[0] == f"f{MAX_RECENTS + 2}.txt"


def test_recents_survive_reopen(tmp_settings_path: Path, settings_service: SettingsService):
    settings_service.add_recent(Path("only.md"))
    settings_service._s.sync()
    again = SettingsService(QSettings(str(tmp_settings_path), QSettings.Format.IniFormat))
    assert again.get_recent() == ["only.md"]


def test_preview_visible_roundtrip(tmp_settings_path: Path, settings_service: SettingsService):
    assert settings_service.get_preview_visible() is True
    settings_service.set_preview_visible(False)
    assert settings_service.get_preview_visible() is False
    settings_service._s.sync()
    again = SettingsService(QSettings(str(tmp_settings_path), QSettings.Format.IniFormat))
    assert again.get_preview_visible() is False
