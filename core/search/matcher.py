# Path: core/search/matcher.py
# Purpose: Match a free-text query against deals and contacts with a cross-reference join.
# Layer: core/search.
# Details: Pure substring matching; results keep source collection order and are capped per kind.

from __future__ import annotations

from typing import List, Sequence, Set

from core.models.domain import EMPTY_RESULT, Contact, Deal, MatchResult

DEFAULT_LIMIT = 5
MIN_QUERY_LENGTH = 2


def contact_matches(contact: Contact, needle: str) -> bool:
    """Return True if the lower-cased needle occurs in the contact's name, email, or phone."""

    if needle in contact.full_name.lower():
        return True
    if contact.email and needle in contact.email.lower():
        return True
    # Phone numbers are compared verbatim.
    return bool(contact.phone) and needle in contact.phone


def match(
    query: str,
    deals: Sequence[Deal],
    contacts: Sequence[Contact],
    limit: int = DEFAULT_LIMIT,
    min_length: int = MIN_QUERY_LENGTH,
) -> MatchResult:
    """
    Return the deals and contacts matching ``query``.

    A deal matches on its title or when any of its contact ids belongs to a
    matching contact. Queries shorter than ``min_length`` (raw length, not
    trimmed) produce an empty result. Both sequences are truncated to
    ``limit`` only after the full contact match set has been used for the join.
    """

    if limit < 0:
        raise ValueError(f"Result limit must be non-negative, got {limit}.")
    if len(query) < min_length:
        return EMPTY_RESULT

    needle = query.lower()

    matched_contacts = [contact for contact in contacts if contact_matches(contact, needle)]
    matched_contact_ids: Set[str] = {contact.id for contact in matched_contacts}

    matched_deals: List[Deal] = []
    seen_deal_ids: Set[str] = set()
    for deal in deals:
        if deal.id in seen_deal_ids:
            continue
        if needle in deal.title.lower() or any(cid in matched_contact_ids for cid in deal.contact_ids):
            seen_deal_ids.add(deal.id)
            matched_deals.append(deal)

    return MatchResult(deals=tuple(matched_deals[:limit]), contacts=tuple(matched_contacts[:limit]))
