# Path: core/session/pointer.py
# Purpose: Provide scoped subscriptions to pointer-down events outside the search component.
# Layer: core/session.
# Details: Sessions hold a subscription only while focused; cancelling it detaches the callback.

from __future__ import annotations

import logging
from typing import Callable, List, Protocol

logger = logging.getLogger(__name__)

PointerCallback = Callable[[bool], None]


class PointerSubscription:
    """Handle returned by a pointer source; ``cancel`` is idempotent."""

    def __init__(self, source: "PointerEventHub", callback: PointerCallback) -> None:
        self._source = source
        self._callback = callback
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self._source._detach(self._callback)


class PointerEventSource(Protocol):
    """Source of pointer-down events; the callback receives whether the press hit the component."""

    def subscribe(self, callback: PointerCallback) -> PointerSubscription:
        """Register ``callback`` until the returned subscription is cancelled."""


class PointerEventHub:
    """In-process pointer source that GUI adapters publish into."""

    def __init__(self) -> None:
        self._callbacks: List[PointerCallback] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def subscribe(self, callback: PointerCallback) -> PointerSubscription:
        self._callbacks.append(callback)
        logger.debug("Pointer listener attached (%d active)", len(self._callbacks))
        return PointerSubscription(self, callback)

    def publish(self, inside: bool) -> None:
        """Deliver one pointer-down event to every current subscriber."""

        for callback in list(self._callbacks):
            callback(inside)

    def _detach(self, callback: PointerCallback) -> None:
        self._callbacks.remove(callback)
        logger.debug("Pointer listener detached (%d active)", len(self._callbacks))
