# Path: core/session/state.py
# Purpose: Define the explicit panel states of a query session.
# Layer: core/session.
# Details: The state is a pure function of focus, query text, and the current match result.

from __future__ import annotations

from enum import Enum

from core.models.domain import MatchResult


class SessionState(str, Enum):
    IDLE = "idle"
    FOCUSED_EMPTY = "focused_empty"
    FOCUSED_RESULTS = "focused_results"
    FOCUSED_NO_RESULTS = "focused_no_results"

    @property
    def panel_visible(self) -> bool:
        return self in (SessionState.FOCUSED_RESULTS, SessionState.FOCUSED_NO_RESULTS)


def derive_state(is_focused: bool, query: str, result: MatchResult, min_length: int) -> SessionState:
    """Map ``(is_focused, query, result)`` onto one of the four panel states."""

    if not is_focused:
        return SessionState.IDLE
    if len(query) < min_length:
        return SessionState.FOCUSED_EMPTY
    if result.is_empty:
        return SessionState.FOCUSED_NO_RESULTS
    return SessionState.FOCUSED_RESULTS
