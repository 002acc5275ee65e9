# Path: core/session/flows.py
# Purpose: Model the deal and contact creation flows opened from the search panel.
# Layer: core/session.
# Details: Flows carry their open state and callbacks; submitting adds the new record to the store.

from __future__ import annotations

import logging
import uuid
from typing import Callable, Iterable, Optional

from core.models.domain import Contact, Deal
from core.store.base import WritableEntityStore

logger = logging.getLogger(__name__)


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class DealCreationFlow:
    """Deal creation dialog state, pre-seeded with a proposed title."""

    def __init__(self, store: WritableEntityStore, on_close: Optional[Callable[[], None]] = None) -> None:
        self.store = store
        self.on_close = on_close
        self.is_open = False
        self.initial_title = ""

    def open(self, initial_title: str = "") -> None:
        self.initial_title = initial_title
        self.is_open = True
        logger.info("Opened deal creation with title %r", initial_title)

    def close(self) -> None:
        self.is_open = False
        if self.on_close is not None:
            self.on_close()

    def submit(self, title: str, contact_ids: Iterable[str] = ()) -> Deal:
        """Create the deal in the store and close the flow."""

        if not self.is_open:
            raise RuntimeError("Deal creation flow is not open.")
        if not title.strip():
            raise ValueError("Deal title must not be blank.")
        deal = Deal(id=_new_id("deal"), title=title, contact_ids=tuple(contact_ids))
        self.store.add_deal(deal)
        logger.info("Created deal %s", deal.id)
        self.close()
        return deal


class ContactCreationFlow:
    """Contact create/edit dialog state; ``contact_to_edit`` is None when creating."""

    def __init__(
        self,
        store: WritableEntityStore,
        on_close: Optional[Callable[[], None]] = None,
        on_created: Optional[Callable[[Contact], None]] = None,
    ) -> None:
        self.store = store
        self.on_close = on_close
        self.on_created = on_created
        self.is_open = False
        self.contact_to_edit: Optional[Contact] = None

    def open(self, contact_to_edit: Optional[Contact] = None) -> None:
        self.contact_to_edit = contact_to_edit
        self.is_open = True
        logger.info("Opened contact creation")

    def close(self) -> None:
        self.is_open = False
        if self.on_close is not None:
            self.on_close()

    def submit(
        self,
        first_name: str,
        last_name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Contact:
        """Create the contact in the store, notify ``on_created``, and close the flow."""

        if not self.is_open:
            raise RuntimeError("Contact creation flow is not open.")
        if self.contact_to_edit is not None:
            raise RuntimeError("Editing existing contacts is not supported from search.")
        if not (first_name.strip() or last_name.strip()):
            raise ValueError("Contact needs a first or last name.")
        contact = Contact(
            id=_new_id("contact"),
            first_name=first_name,
            last_name=last_name,
            email=email or None,
            phone=phone or None,
        )
        self.store.add_contact(contact)
        logger.info("Created contact %s", contact.id)
        if self.on_created is not None:
            self.on_created(contact)
        self.close()
        return contact
