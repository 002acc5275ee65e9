# Path: core/session/navigation.py
# Purpose: Define the router contract used to open record detail views.
# Layer: core/session.
# Details: HistoryNavigator keeps visited paths in memory for the desktop shell and tests.

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

logger = logging.getLogger(__name__)


def deal_path(deal_id: str) -> str:
    return f"/deals/{deal_id}"


class Navigator(ABC):
    """Abstract router."""

    @abstractmethod
    def go_to(self, path: str) -> None:
        """Navigate to the given application path."""


class HistoryNavigator(Navigator):
    """Navigator that records every visited path."""

    def __init__(self) -> None:
        self.history: List[str] = []

    @property
    def current(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def go_to(self, path: str) -> None:
        logger.info("Navigating to %s", path)
        self.history.append(path)
