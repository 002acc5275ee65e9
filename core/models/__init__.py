# Path: core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses used across search, session, and interface layers.

from .domain import EMPTY_RESULT, Contact, Deal, MatchResult

__all__ = ["EMPTY_RESULT", "Contact", "Deal", "MatchResult"]
