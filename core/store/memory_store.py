# Path: core/store/memory_store.py
# Purpose: Provide an in-memory entity store backed by plain lists.
# Layer: core/store.
# Details: Loads deals and contacts from a JSON snapshot and tracks a mutation revision.

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from core.models.domain import Contact, Deal
from .base import WritableEntityStore

logger = logging.getLogger(__name__)


class InMemoryEntityStore(WritableEntityStore):
    """List-backed store; collection order is insertion order."""

    def __init__(self, deals: Iterable[Deal] = (), contacts: Iterable[Contact] = ()) -> None:
        self._deals: List[Deal] = []
        self._contacts: List[Contact] = []
        self._deal_index: Dict[str, Deal] = {}
        self._contact_index: Dict[str, Contact] = {}
        self._revision = 0
        self.active_contact_id: Optional[str] = None
        for contact in contacts:
            self.add_contact(contact)
        for deal in deals:
            self.add_deal(deal)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "InMemoryEntityStore":
        """Build a store from a ``{"deals": [...], "contacts": [...]}`` mapping."""

        raw_deals = payload.get("deals") or []
        raw_contacts = payload.get("contacts") or []
        if not isinstance(raw_deals, list) or not isinstance(raw_contacts, list):
            raise ValueError("Snapshot 'deals' and 'contacts' must be lists.")
        return cls(
            deals=[Deal.from_dict(item) for item in raw_deals],
            contacts=[Contact.from_dict(item) for item in raw_contacts],
        )

    @classmethod
    def from_file(cls, path: Path | str) -> "InMemoryEntityStore":
        """Load a store from a JSON snapshot file."""

        snapshot_path = Path(path)
        if not snapshot_path.exists():
            raise FileNotFoundError(f"Missing entity snapshot {snapshot_path}.")
        payload = json.loads(snapshot_path.read_text(encoding="utf-8"))
        store = cls.from_payload(payload)
        logger.info(
            "Loaded %d deals and %d contacts from %s",
            len(store._deals),
            len(store._contacts),
            snapshot_path,
        )
        return store

    @property
    def deals(self) -> Tuple[Deal, ...]:
        return tuple(self._deals)

    @property
    def contacts(self) -> Tuple[Contact, ...]:
        return tuple(self._contacts)

    @property
    def revision(self) -> int:
        return self._revision

    def show_contact_detail(self, contact_id: str) -> None:
        """Record the contact whose detail view is open."""

        self.active_contact_id = contact_id
        logger.info("Showing contact detail for %s", contact_id)

    def add_deal(self, deal: Deal) -> None:
        if deal.id in self._deal_index:
            raise ValueError(f"Deal with id {deal.id} already exists.")
        self._deals.append(deal)
        self._deal_index[deal.id] = deal
        self._revision += 1

    def add_contact(self, contact: Contact) -> None:
        if contact.id in self._contact_index:
            raise ValueError(f"Contact with id {contact.id} already exists.")
        self._contacts.append(contact)
        self._contact_index[contact.id] = contact
        self._revision += 1

    def get_deal(self, deal_id: str) -> Deal:
        try:
            return self._deal_index[deal_id]
        except KeyError:
            raise KeyError(f"Unknown deal id: {deal_id}") from None

    def get_contact(self, contact_id: str) -> Contact:
        try:
            return self._contact_index[contact_id]
        except KeyError:
            raise KeyError(f"Unknown contact id: {contact_id}") from None
