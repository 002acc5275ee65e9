# Path: core/search/pipeline.py
# Purpose: Bind the matcher to an entity store and search settings.
# Layer: core/search.
# Details: Recomputes results from the current store snapshot whenever the query or revision changes.

from __future__ import annotations

import logging
from typing import Optional, Tuple

from config.settings import SearchSettings
from core.models.domain import MatchResult
from core.store.base import EntityStore
from .matcher import match

logger = logging.getLogger(__name__)


class SearchPipeline:
    """High-level service bridging GUI/API layers with the entity store."""

    def __init__(self, store: EntityStore, settings: Optional[SearchSettings] = None) -> None:
        self.store = store
        self.settings = settings or SearchSettings()
        self._last_key: Optional[Tuple[str, int, int]] = None
        self._last_result: Optional[MatchResult] = None

    @property
    def min_query_length(self) -> int:
        return self.settings.min_query_length

    def search(self, query: str, limit: Optional[int] = None) -> MatchResult:
        """
        Match ``query`` against the store's current deals and contacts.

        External calls:
        - core/search/matcher.py::match - performs the substring match and cross-reference join.

        The last result is reused while the query, limit, and store revision are unchanged.
        """

        effective_limit = self.settings.result_limit if limit is None else limit
        key = (query, self.store.revision, effective_limit)
        if key == self._last_key and self._last_result is not None:
            return self._last_result

        result = match(
            query,
            self.store.deals,
            self.store.contacts,
            limit=effective_limit,
            min_length=self.settings.min_query_length,
        )
        logger.debug(
            "Recomputed results for %r at revision %d: %d deals, %d contacts",
            query,
            self.store.revision,
            len(result.deals),
            len(result.contacts),
        )
        self._last_key = key
        self._last_result = result
        return result
