# Path: core/session/query_session.py
# Purpose: Own the query text and panel focus, and turn result selection into side effects.
# Layer: core/session.
# Details: Panel state is derived on access; the outside-pointer subscription is held only while focused.

from __future__ import annotations

import logging
from typing import Optional

from core.models.domain import Contact, MatchResult
from core.search.pipeline import SearchPipeline
from core.store.base import WritableEntityStore
from .flows import ContactCreationFlow, DealCreationFlow
from .navigation import Navigator, deal_path
from .pointer import PointerEventSource, PointerSubscription
from .state import SessionState, derive_state

logger = logging.getLogger(__name__)


class QuerySession:
    """State machine behind the global search box."""

    def __init__(
        self,
        pipeline: SearchPipeline,
        navigator: Navigator,
        pointer_source: PointerEventSource,
        deal_flow: Optional[DealCreationFlow] = None,
        contact_flow: Optional[ContactCreationFlow] = None,
    ) -> None:
        self.pipeline = pipeline
        self.navigator = navigator
        self.pointer_source = pointer_source
        if (deal_flow is None or contact_flow is None) and not isinstance(pipeline.store, WritableEntityStore):
            raise ValueError("Creation flows must be supplied when the entity store is read-only.")
        self.deal_flow = deal_flow or DealCreationFlow(pipeline.store)
        self.contact_flow = contact_flow or ContactCreationFlow(pipeline.store)
        if self.contact_flow.on_created is None:
            self.contact_flow.on_created = self._on_contact_created
        self.query = ""
        self._focused = False
        self._subscription: Optional[PointerSubscription] = None

    @property
    def result(self) -> MatchResult:
        """Return the match result for the current query and store snapshot."""

        # core/search/pipeline.py::SearchPipeline.search - recomputes only on query or store changes.
        return self.pipeline.search(self.query)

    @property
    def state(self) -> SessionState:
        return derive_state(self._focused, self.query, self.result, self.pipeline.min_query_length)

    @property
    def holds_pointer_subscription(self) -> bool:
        return self._subscription is not None

    def focus(self) -> None:
        if self._focused:
            return
        self._focused = True
        self._subscription = self.pointer_source.subscribe(self.pointer_down)
        logger.debug("Search focused")

    def set_query(self, text: str) -> None:
        self.query = text

    def blur(self) -> None:
        self._enter_idle()

    def pointer_down(self, inside: bool) -> None:
        """Handle a pointer press; presses outside the component dismiss the panel."""

        if not inside:
            self._enter_idle()

    def select_deal(self, deal_id: str) -> None:
        self.navigator.go_to(deal_path(deal_id))
        self.query = ""
        self._enter_idle()

    def select_contact(self, contact_id: str) -> None:
        self.pipeline.store.show_contact_detail(contact_id)
        self.query = ""
        self._enter_idle()

    def create_deal(self) -> None:
        self.deal_flow.open(initial_title=self.query)
        self._enter_idle()

    def create_contact(self) -> None:
        self.contact_flow.open(contact_to_edit=None)
        self._enter_idle()

    def dispose(self) -> None:
        """Release the pointer subscription when the owning component goes away."""

        self._enter_idle()

    def _enter_idle(self) -> None:
        self._focused = False
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
            logger.debug("Search dismissed")

    def _on_contact_created(self, contact: Contact) -> None:
        # No follow-up action yet, e.g. offering a deal for the new contact.
        logger.info("Contact %s created from search", contact.id)
