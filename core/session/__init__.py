# Path: core/session/__init__.py
# Purpose: Package initializer for the query session state machine and its collaborators.
# Layer: core/session.
# Details: Exposes the session, panel states, pointer subscriptions, navigator, and creation flows.

from .flows import ContactCreationFlow, DealCreationFlow
from .navigation import HistoryNavigator, Navigator, deal_path
from .pointer import PointerEventHub, PointerEventSource, PointerSubscription
from .query_session import QuerySession
from .state import SessionState, derive_state

__all__ = [
    "ContactCreationFlow",
    "DealCreationFlow",
    "HistoryNavigator",
    "Navigator",
    "PointerEventHub",
    "PointerEventSource",
    "PointerSubscription",
    "QuerySession",
    "SessionState",
    "deal_path",
    "derive_state",
]
