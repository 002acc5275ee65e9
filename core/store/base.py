# Path: core/store/base.py
# Purpose: Define the store interfaces owning the deal and contact collections.
# Layer: core/store.
# Details: Search consumes EntityStore snapshots; creation flows need WritableEntityStore.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

from core.models.domain import Contact, Deal


class EntityStore(ABC):
    """Read side of the external owner of deals and contacts."""

    @property
    @abstractmethod
    def deals(self) -> Tuple[Deal, ...]:
        """Return a read snapshot of all deals in insertion order."""

    @property
    @abstractmethod
    def contacts(self) -> Tuple[Contact, ...]:
        """Return a read snapshot of all contacts in insertion order."""

    @property
    @abstractmethod
    def revision(self) -> int:
        """Return a counter that changes whenever either collection is mutated."""

    @abstractmethod
    def show_contact_detail(self, contact_id: str) -> None:
        """Open the detail view of the given contact in place."""


class WritableEntityStore(EntityStore):
    """Store that also accepts new records and id lookups."""

    @abstractmethod
    def add_deal(self, deal: Deal) -> None:
        """Append a new deal to the collection."""

    @abstractmethod
    def add_contact(self, contact: Contact) -> None:
        """Append a new contact to the collection."""

    @abstractmethod
    def get_deal(self, deal_id: str) -> Deal:
        """Return the deal with the given id or raise KeyError."""

    @abstractmethod
    def get_contact(self, contact_id: str) -> Contact:
        """Return the contact with the given id or raise KeyError."""
