from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from pypad.di.container import Container
from pypad.services.ui.file_open_filter import FileOpenEventFilter
from pypad.utils.constants import APP_NAME, APP_ORG
from pypad.utils.logging_setup import configure_logging

_LOGGER = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container, and opens
    one window per file argument (or a single untitled window).
    """
    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default()
    configure_logging(container.config.get("logging", "level", "INFO") or "INFO")
    controller = container.controller

    # System "open with" requests arrive as QFileOpenEvent on the application
    open_filter = FileOpenEventFilter(controller, app)
    app.installEventFilter(open_filter)

    opened = controller.open_paths(Path(a) for a in argv[1:])
    if not controller.registry:
        if argv[1:] and not opened:
            _LOGGER.warning("None of the requested files could be opened")
        controller.new_document()

    return app.exec()
