from __future__ import annotations

from pathlib import Path
from typing import Any

from PyQt6.QtCore import QSettings

from pypad.domain.interfaces import IConfigService, IFileService, IMarkdownRenderer, ISettingsService
from pypad.domain.models import Document
from pypad.services.config.ini_config_service import IniConfigService
from pypad.services.config.window_config import WindowConfig
from pypad.services.file_service import FileService
from pypad.services.lifecycle.controller import IFileCommands, WindowLifecycleController
from pypad.services.lifecycle.registry import WindowRegistry
from pypad.services.markdown_renderer import MarkdownRenderer
from pypad.services.settings_service import SettingsService
from pypad.services.ui.about import AboutDialog
from pypad.services.ui.adapters import QtFileDialogService, QtMessageService
from pypad.services.ui.document_window import DocumentWindow
from pypad.services.ui.ports.dialogs import IFileDialogService
from pypad.services.ui.ports.messages import IMessageService
from pypad.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Owns the single WindowRegistry of the process
      - Builds the lifecycle controller with a DocumentWindow factory
    """

    def __init__(
        self,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        config: IConfigService | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer()
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.config: IConfigService = config or IniConfigService()
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

        self.registry = WindowRegistry()
        self._controller: WindowLifecycleController | None = None
        self._about: AboutDialog | None = None

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config_path: Path | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=IniConfigService(explicit_path=config_path))

    # ---------- factories ----------
    @property
    def window_config(self) -> WindowConfig:
        return WindowConfig.from_config(self.config)

    def build_window(self, document: Document, commands: IFileCommands) -> DocumentWindow:
        return DocumentWindow(
            document,
            commands,
            renderer=self.renderer,
            file_service=self.file_service,
            settings=self.settings_service,
        )

    def show_about(self, parent: Any | None = None) -> None:
        if self._about is None:
            self._about = AboutDialog(version=self.config.app_version())
        self._about.show()
        self._about.raise_()

    @property
    def controller(self) -> WindowLifecycleController:
        """The one controller of the process, created on first use."""
        if self._controller is None:
            self._controller = WindowLifecycleController(
                window_factory=self.build_window,
                files=self.file_service,
                dialogs=self.dialogs,
                messages=self.messages,
                settings=self.settings_service,
                registry=self.registry,
                window_config=self.window_config,
                about=self.show_about,
            )
        return self._controller
