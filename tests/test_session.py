"""
QuerySession tests.

Covers:
  - Derived panel state for every focus/query/result combination
  - Outside pointer-down dismissal and subscription lifetime
  - Deal and contact selection side effects
  - Create deal / create contact shortcuts
"""

import pytest

from core.models.domain import MatchResult
from core.session import SessionState, derive_state


# ============================================================================
# derive_state
# ============================================================================

class TestDeriveState:
    def test_unfocused_is_idle(self, alice):
        assert derive_state(False, "alice", MatchResult(contacts=(alice,)), 2) is SessionState.IDLE

    def test_short_query_is_focused_empty(self):
        assert derive_state(True, "a", MatchResult(), 2) is SessionState.FOCUSED_EMPTY

    def test_no_results(self):
        assert derive_state(True, "zz", MatchResult(), 2) is SessionState.FOCUSED_NO_RESULTS

    def test_results(self, alice):
        assert derive_state(True, "al", MatchResult(contacts=(alice,)), 2) is SessionState.FOCUSED_RESULTS

    @pytest.mark.parametrize(
        "state, visible",
        [
            (SessionState.IDLE, False),
            (SessionState.FOCUSED_EMPTY, False),
            (SessionState.FOCUSED_RESULTS, True),
            (SessionState.FOCUSED_NO_RESULTS, True),
        ],
    )
    def test_panel_visibility(self, state, visible):
        assert state.panel_visible is visible


# ============================================================================
# Typing and focus
# ============================================================================

class TestTransitions:
    def test_starts_idle(self, session):
        assert session.state is SessionState.IDLE
        assert not session.holds_pointer_subscription

    def test_focus_then_type(self, session):
        session.focus()
        assert session.state is SessionState.FOCUSED_EMPTY
        session.set_query("a")
        assert session.state is SessionState.FOCUSED_EMPTY
        session.set_query("al")
        assert session.state is SessionState.FOCUSED_RESULTS
        session.set_query("alz")
        assert session.state is SessionState.FOCUSED_NO_RESULTS
        session.set_query("")
        assert session.state is SessionState.FOCUSED_EMPTY

    def test_typing_while_unfocused_keeps_panel_hidden(self, session):
        session.set_query("alice")
        assert session.state is SessionState.IDLE
        assert session.result.contacts

    def test_result_tracks_query(self, session, alice):
        session.focus()
        session.set_query("ALICE")
        assert session.result.contacts == (alice,)

    def test_blur_returns_to_idle(self, session, pointer_hub):
        session.focus()
        session.blur()
        assert session.state is SessionState.IDLE
        assert pointer_hub.subscriber_count == 0


# ============================================================================
# Outside pointer-down
# ============================================================================

class TestPointerDismissal:
    def test_outside_press_dismisses(self, session, pointer_hub):
        session.focus()
        session.set_query("alice")
        pointer_hub.publish(False)
        assert session.state is SessionState.IDLE
        assert session.query == "alice"

    def test_inside_press_keeps_panel(self, session, pointer_hub):
        session.focus()
        session.set_query("alice")
        pointer_hub.publish(True)
        assert session.state is SessionState.FOCUSED_RESULTS

    def test_subscription_held_only_while_focused(self, session, pointer_hub):
        assert pointer_hub.subscriber_count == 0
        session.focus()
        session.focus()
        assert pointer_hub.subscriber_count == 1
        pointer_hub.publish(False)
        assert pointer_hub.subscriber_count == 0
        session.focus()
        assert pointer_hub.subscriber_count == 1

    def test_repeated_sessions_do_not_leak(self, pipeline, navigator, pointer_hub):
        from core.session import QuerySession

        for _ in range(3):
            session = QuerySession(pipeline, navigator, pointer_hub)
            session.focus()
            session.dispose()
        assert pointer_hub.subscriber_count == 0

    def test_subscription_cancel_is_idempotent(self, pointer_hub):
        subscription = pointer_hub.subscribe(lambda inside: None)
        subscription.cancel()
        subscription.cancel()
        assert pointer_hub.subscriber_count == 0


# ============================================================================
# Selection and creation side effects
# ============================================================================

class TestSideEffects:
    def test_select_deal_navigates_and_clears(self, session, navigator):
        session.focus()
        session.set_query("renewal")
        session.select_deal("d1")
        assert navigator.current == "/deals/d1"
        assert session.query == ""
        assert session.state is SessionState.IDLE
        assert not session.holds_pointer_subscription

    def test_select_contact_opens_detail_in_place(self, session, store, navigator):
        session.focus()
        session.set_query("bob")
        session.select_contact("c2")
        assert store.active_contact_id == "c2"
        assert navigator.history == []
        assert session.query == ""
        assert session.state is SessionState.IDLE

    def test_create_deal_seeds_title_with_query(self, session):
        session.focus()
        session.set_query("Big Widget Order")
        assert session.state is SessionState.FOCUSED_NO_RESULTS
        session.create_deal()
        assert session.deal_flow.is_open
        assert session.deal_flow.initial_title == "Big Widget Order"
        assert session.state is SessionState.IDLE
        assert session.query == "Big Widget Order"

    def test_create_contact_opens_blank_flow(self, session):
        session.focus()
        session.set_query("nobody here")
        session.create_contact()
        assert session.contact_flow.is_open
        assert session.contact_flow.contact_to_edit is None
        assert session.state is SessionState.IDLE

    def test_contact_created_from_search_takes_no_follow_up(self, session, navigator):
        session.focus()
        session.set_query("zora")
        session.create_contact()
        contact = session.contact_flow.submit("Zora", "Neale")
        assert not session.contact_flow.is_open
        assert not session.deal_flow.is_open
        assert navigator.history == []
        assert session.state is SessionState.IDLE
        session.focus()
        assert session.result.contacts == (contact,)
