# Path: core/models/domain.py
# Purpose: Define domain models shared across matching, session, and interface layers.
# Layer: core/models.
# Details: Frozen dataclasses; the entity store owns instances and the search layer only reads them.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


def _pick(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in payload:
            return payload[key]
    return default


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None


@dataclass(frozen=True)
class Contact:
    """A person in the CRM, matched by name, email, or phone."""

    id: str
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Contact":
        """Build a contact from snake_case or camelCase snapshot keys."""

        if "id" not in payload:
            raise ValueError(f"Contact payload is missing an id: {payload!r}")
        return cls(
            id=str(payload["id"]),
            first_name=_optional_text(_pick(payload, "first_name", "firstName")) or "",
            last_name=_optional_text(_pick(payload, "last_name", "lastName")) or "",
            email=_optional_text(_pick(payload, "email")),
            phone=_optional_text(_pick(payload, "phone")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone": self.phone,
        }


@dataclass(frozen=True)
class Deal:
    """A sales opportunity linked to zero or more contacts by id."""

    id: str
    title: str
    contact_ids: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Deal":
        """Build a deal from snake_case or camelCase snapshot keys."""

        if "id" not in payload:
            raise ValueError(f"Deal payload is missing an id: {payload!r}")
        contact_ids = _pick(payload, "contact_ids", "contactIds", default=()) or ()
        return cls(
            id=str(payload["id"]),
            title=_optional_text(_pick(payload, "title")) or "",
            contact_ids=tuple(str(contact_id) for contact_id in contact_ids),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "contact_ids": list(self.contact_ids)}


@dataclass(frozen=True)
class MatchResult:
    """Capped deals and contacts matching one query, in source collection order."""

    deals: Tuple[Deal, ...] = field(default_factory=tuple)
    contacts: Tuple[Contact, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.deals and not self.contacts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "deals": [deal.to_dict() for deal in self.deals],
            "contacts": [contact.to_dict() for contact in self.contacts],
        }


EMPTY_RESULT = MatchResult()
