# Path: core/search/__init__.py
# Purpose: Package initializer for matching and pipeline orchestration.
# Layer: core/search.
# Details: Exposes the pure matcher and the store-bound search pipeline.

from .matcher import DEFAULT_LIMIT, MIN_QUERY_LENGTH, contact_matches, match
from .pipeline import SearchPipeline

__all__ = ["DEFAULT_LIMIT", "MIN_QUERY_LENGTH", "SearchPipeline", "contact_matches", "match"]
