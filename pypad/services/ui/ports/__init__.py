from __future__ import annotations

from .dialogs import IFileDialogService
from .messages import CloseChoice, IMessageService

__all__ = [
    "IFileDialogService",
    "IMessageService",
    "CloseChoice",
]
