"""
GlobalSearchWidget smoke tests on the offscreen Qt platform.

Skipped when PySide6 is not installed.
"""

import os

import pytest

pytest.importorskip("PySide6")
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QEvent, QPoint, QPointF, Qt  # noqa: E402
from PySide6.QtGui import QMouseEvent  # noqa: E402
from PySide6.QtWidgets import QApplication, QPushButton  # noqa: E402

from core.session import SessionState  # noqa: E402
from gui.view_models import GlobalSearchViewModel  # noqa: E402
from gui.widgets.global_search import GlobalSearchWidget  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def widget(qapp, session, pointer_hub):
    widget = GlobalSearchWidget(GlobalSearchViewModel(session), pointer_hub)
    yield widget
    widget.dispose()
    widget.deleteLater()


def _buttons(widget):
    return [item for item in widget._panel_widgets if isinstance(item, QPushButton)]


def test_panel_hidden_until_query(widget):
    assert widget.panel.isHidden()
    assert widget.input.placeholderText() == "Search deals or contacts..."


def test_typing_renders_results(widget, session):
    session.focus()
    widget.input.setText("alice")
    assert not widget.panel.isHidden()
    assert [button.text() for button in _buttons(widget)] == ["Renewal", "Alice Follow-up", "Alice Nguyen"]


def test_clicking_deal_navigates_and_clears_input(widget, session, navigator):
    session.focus()
    widget.input.setText("alice")
    _buttons(widget)[0].click()
    assert navigator.current == "/deals/d1"
    assert widget.input.text() == ""
    assert widget.panel.isHidden()


def test_no_results_offers_creation(widget, session):
    session.focus()
    widget.input.setText("qq")
    assert [button.text() for button in widget.panel.findChildren(QPushButton) if button.text().startswith("Create")]
    widget._on_create_deal()
    assert session.deal_flow.initial_title == "qq"
    assert widget.panel.isHidden()


def test_outside_press_hides_panel(widget, session, pointer_hub):
    session.focus()
    widget.input.setText("alice")
    pointer_hub.publish(False)
    widget.refresh()
    assert widget.panel.isHidden()


def test_main_window_reports_route(qapp, store):
    from gui.main_window import MainWindow

    window = MainWindow(store)
    window.session.focus()
    window.search_widget.input.setText("alice")
    _buttons(window.search_widget)[1].click()
    window.update_status()
    assert window.status_label.text().startswith("Route: /deals/d2")
    window.search_widget.dispose()
    window.deleteLater()


def _press(target, local):
    global_pos = QPointF(target.mapToGlobal(local))
    event = QMouseEvent(
        QEvent.MouseButtonPress,
        QPointF(local),
        global_pos,
        Qt.LeftButton,
        Qt.LeftButton,
        Qt.NoModifier,
    )
    QApplication.sendEvent(target, event)


def test_outside_press_through_event_filter_clears_input_focus(widget, session):
    session.focus()
    widget.input.setText("alice")
    assert not widget.panel.isHidden()

    _press(widget, QPoint(-500, -500))

    assert session.state is SessionState.IDLE
    assert not widget.input.hasFocus()
    assert widget.panel.isHidden()


def test_clicking_back_into_input_reopens_panel(widget, session):
    session.focus()
    widget.input.setText("alice")
    _press(widget, QPoint(-500, -500))
    assert widget.panel.isHidden()

    _press(widget.input, QPoint(2, 2))
    widget.input.setText("alice n")

    assert session.state is SessionState.FOCUSED_RESULTS
    assert not widget.panel.isHidden()
