from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class CloseChoice(Enum):
    """The four answers to the unsaved-changes prompt."""

    SAVE = auto()
    SAVE_AS = auto()
    DISCARD = auto()
    CANCEL = auto()


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for showing messages. Decouples lifecycle logic from Qt widgets.
    """

    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def confirm_close(self, parent: Any | None, title: str, text: str) -> CloseChoice:
        """
        Modal Save / Save As / Discard / Cancel prompt.
        Dismissing the prompt any other way counts as CANCEL.
        """
        ...
