# Path: scripts/quick_search_demo.py
# Purpose: Simple CLI to run a search query against a CRM snapshot.
# Layer: scripts.
# Details: Loads deals and contacts from JSON and prints the capped result sections.

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import AppSettings, SearchSettings, setup_logging
from core.search.pipeline import SearchPipeline
from core.store.memory_store import InMemoryEntityStore


def format_result(pipeline: SearchPipeline, query: str) -> List[str]:
    """Render the result of ``query`` as printable lines."""

    if len(query) < pipeline.min_query_length:
        return [f"Type at least {pipeline.min_query_length} characters to search."]

    result = pipeline.search(query)
    if result.is_empty:
        return [f'No results found for "{query}".']

    lines: List[str] = []
    if result.deals:
        lines.append("Deals")
        lines.extend(f"  {deal.id}  {deal.title}" for deal in result.deals)
    if result.contacts:
        lines.append("Contacts")
        lines.extend(f"  {contact.id}  {contact.full_name}" for contact in result.contacts)
    return lines


def main(argv: Optional[List[str]] = None) -> None:
    """Execute a quick search from the command line."""

    settings = AppSettings.from_env()
    parser = argparse.ArgumentParser(description="Search deals and contacts in a CRM snapshot")
    parser.add_argument("--query", type=str, required=True, help="Text to search for")
    parser.add_argument("--data", type=Path, default=settings.data_path, help="JSON snapshot with deals and contacts")
    parser.add_argument("--limit", type=int, default=settings.search.result_limit, help="Results per entity kind")
    parser.add_argument("--log-level", type=str, default=settings.log_level, help="Logging verbosity")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    store = InMemoryEntityStore.from_file(args.data)
    search_settings = SearchSettings(
        result_limit=args.limit,
        min_query_length=settings.search.min_query_length,
    )
    pipeline = SearchPipeline(store, search_settings)

    for line in format_result(pipeline, args.query):
        print(line)


if __name__ == "__main__":
    main()
