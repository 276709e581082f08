from __future__ import annotations

import logging
from typing import Generic, Hashable, Iterator, TypeVar

_LOGGER = logging.getLogger(__name__)

H = TypeVar("H")


class WindowRegistry(Generic[H]):
    """
    Process-wide owner of every open window's close-intercept handler.

    Windows only keep a weak reference to their handler, so the entry here is
    what keeps it alive. An entry exists from window creation until the window
    reports that it has closed. Mutated from the GUI thread only.
    """

    def __init__(self) -> None:
        self._handlers: dict[Hashable, H] = {}

    def register(self, window: Hashable, handler: H) -> None:
        if window in self._handlers:
            _LOGGER.debug("Replacing close handler for %r", window)
        self._handlers[window] = handler

    def unregister(self, window: Hashable) -> H | None:
        handler = self._handlers.pop(window, None)
        if handler is None:
            _LOGGER.debug("unregister() for unknown window %r", window)
        return handler

    def handler_for(self, window: Hashable | None) -> H | None:
        if window is None:
            return None
        return self._handlers.get(window)

    def windows(self) -> list[Hashable]:
        return list(self._handlers)

    def handlers(self) -> list[H]:
        return list(self._handlers.values())

    def __contains__(self, window: object) -> bool:
        return window in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._handlers))
