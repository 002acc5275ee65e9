# Path: gui/view_models.py
# Purpose: Provide view models mediating between GUI interactions and the query session.
# Layer: gui.
# Details: Projects session state into render-ready sections without importing any Qt module.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from core.session.query_session import QuerySession
from core.session.state import SessionState

PLACEHOLDER = "Search deals or contacts..."


@dataclass(frozen=True)
class ResultRow:
    kind: str
    id: str
    label: str


@dataclass(frozen=True)
class ResultSection:
    title: str
    rows: Tuple[ResultRow, ...]


class GlobalSearchViewModel:
    """View model encapsulating the global search box for the GUI."""

    placeholder = PLACEHOLDER

    def __init__(self, session: QuerySession) -> None:
        self.session = session

    @property
    def state(self) -> SessionState:
        return self.session.state

    @property
    def panel_visible(self) -> bool:
        return self.state.panel_visible

    def sections(self) -> List[ResultSection]:
        """Return the non-empty result sections, deals first, when results are shown."""

        if self.state is not SessionState.FOCUSED_RESULTS:
            return []
        result = self.session.result
        sections: List[ResultSection] = []
        if result.deals:
            rows = tuple(ResultRow(kind="deal", id=deal.id, label=deal.title) for deal in result.deals)
            sections.append(ResultSection(title="Deals", rows=rows))
        if result.contacts:
            rows = tuple(
                ResultRow(kind="contact", id=contact.id, label=contact.full_name) for contact in result.contacts
            )
            sections.append(ResultSection(title="Contacts", rows=rows))
        return sections

    def empty_message(self) -> Optional[str]:
        if self.state is not SessionState.FOCUSED_NO_RESULTS:
            return None
        return f'No results found for "{self.session.query}".'

    def activate(self, row: ResultRow) -> None:
        """Dispatch a clicked row to the matching session selection."""

        if row.kind == "deal":
            self.session.select_deal(row.id)
        elif row.kind == "contact":
            self.session.select_contact(row.id)
        else:
            raise ValueError(f"Unknown result row kind: {row.kind}")
