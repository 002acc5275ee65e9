# Path: gui/widgets/global_search.py
# Purpose: Provide the global search box widget with its dropdown result panel.
# Layer: gui.
# Details: Forwards application-wide mouse presses to the session through a scoped pointer hub.

from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import QEvent, QObject
from PySide6.QtWidgets import (
    QApplication,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.session.pointer import PointerEventHub
from ..view_models import GlobalSearchViewModel, ResultRow


class QtPointerEventSource(QObject):
    """Application event filter publishing mouse presses relative to a target widget.

    ``on_outside`` runs only after presses outside the target so that buttons
    inside the panel survive until they emit ``clicked``.
    """

    def __init__(self, target: QWidget, hub: PointerEventHub, on_outside: Callable[[], None]) -> None:
        super().__init__(target)
        self._target = target
        self._on_outside = on_outside
        self.hub = hub

    def eventFilter(self, watched, event) -> bool:  # noqa: N802 - Qt naming
        if event.type() == QEvent.MouseButtonPress and self.hub.subscriber_count:
            local = self._target.mapFromGlobal(event.globalPosition().toPoint())
            inside = self._target.rect().contains(local)
            self.hub.publish(inside)
            if not inside:
                self._on_outside()
        return False


class GlobalSearchWidget(QWidget):
    """Search input plus a result panel rendered from GlobalSearchViewModel."""

    def __init__(self, view_model: GlobalSearchViewModel, hub: PointerEventHub, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.view_model = view_model
        self._pointer_filter = QtPointerEventSource(self, hub, self._on_outside_press)
        app = QApplication.instance()
        if app is not None:
            app.installEventFilter(self._pointer_filter)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.input = QLineEdit()
        self.input.setPlaceholderText(view_model.placeholder)
        self.input.textChanged.connect(self._on_text_changed)
        self.input.installEventFilter(self)
        layout.addWidget(self.input)

        self.panel = QFrame()
        self.panel.setFrameShape(QFrame.StyledPanel)
        self._panel_layout = QVBoxLayout(self.panel)
        layout.addWidget(self.panel)
        self._panel_widgets: List[QWidget] = []
        self.refresh()

    def eventFilter(self, watched, event) -> bool:  # noqa: N802 - Qt naming
        # A click on an input that already holds focus emits no FocusIn.
        if watched is self.input and event.type() in (QEvent.FocusIn, QEvent.MouseButtonPress):
            self.view_model.session.focus()
            self.refresh()
        return super().eventFilter(watched, event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self.dispose()
        super().closeEvent(event)

    def dispose(self) -> None:
        """Detach the application event filter and release the session's pointer subscription."""

        app = QApplication.instance()
        if app is not None:
            app.removeEventFilter(self._pointer_filter)
        self.view_model.session.dispose()

    def refresh(self) -> None:
        """Rebuild the result panel from the current view model state."""

        for widget in self._panel_widgets:
            self._panel_layout.removeWidget(widget)
            widget.deleteLater()
        self._panel_widgets = []

        if not self.view_model.panel_visible:
            self.panel.hide()
            return

        message = self.view_model.empty_message()
        if message is not None:
            self._add_panel_widget(QLabel(message))
            actions = QWidget()
            actions_layout = QHBoxLayout(actions)
            create_deal = QPushButton("Create Deal")
            create_deal.clicked.connect(self._on_create_deal)
            create_contact = QPushButton("Create Contact")
            create_contact.clicked.connect(self._on_create_contact)
            actions_layout.addWidget(create_deal)
            actions_layout.addWidget(create_contact)
            self._add_panel_widget(actions)
        else:
            for section in self.view_model.sections():
                self._add_panel_widget(QLabel(section.title.upper()))
                for row in section.rows:
                    button = QPushButton(row.label)
                    button.setFlat(True)
                    button.clicked.connect(lambda _checked=False, r=row: self._on_row_clicked(r))
                    self._add_panel_widget(button)
        self.panel.show()

    def _add_panel_widget(self, widget: QWidget) -> None:
        self._panel_layout.addWidget(widget)
        self._panel_widgets.append(widget)

    def _on_text_changed(self, text: str) -> None:
        self.view_model.session.set_query(text)
        self.refresh()

    def _on_row_clicked(self, row: ResultRow) -> None:
        self.view_model.activate(row)
        self._sync_input()

    def _on_create_deal(self) -> None:
        self.view_model.session.create_deal()
        self.refresh()

    def _on_create_contact(self) -> None:
        self.view_model.session.create_contact()
        self.refresh()

    def _sync_input(self) -> None:
        if self.input.text() != self.view_model.session.query:
            self.input.blockSignals(True)
            self.input.setText(self.view_model.session.query)
            self.input.blockSignals(False)
        self.input.clearFocus()
        self.refresh()

    def _on_outside_press(self) -> None:
        self.input.clearFocus()
        self.refresh()
