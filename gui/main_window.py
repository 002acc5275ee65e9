# Path: gui/main_window.py
# Purpose: Define the main desktop window hosting the global search box.
# Layer: gui.
# Details: Shows the current route and open contact beneath the search box; F11 toggles fullscreen.

from __future__ import annotations

import sys
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QVBoxLayout, QWidget

from config import AppSettings, setup_logging
from core.search.pipeline import SearchPipeline
from core.session import HistoryNavigator, PointerEventHub, QuerySession
from core.store.memory_store import InMemoryEntityStore
from .view_models import GlobalSearchViewModel
from .widgets.global_search import GlobalSearchWidget


class MainWindow(QMainWindow):
    """Main application window with the search box and a detail status line."""

    def __init__(self, store: InMemoryEntityStore, settings: Optional[AppSettings] = None) -> None:
        super().__init__()
        self.settings = settings or AppSettings()
        self.store = store
        self.navigator = HistoryNavigator()
        self.pointer_hub = PointerEventHub()
        pipeline = SearchPipeline(store, self.settings.search)
        self.session = QuerySession(pipeline, self.navigator, self.pointer_hub)
        self.view_model = GlobalSearchViewModel(self.session)

        self.setWindowTitle("CRM Search")
        container = QWidget()
        layout = QVBoxLayout(container)
        self.search_widget = GlobalSearchWidget(self.view_model, self.pointer_hub)
        layout.addWidget(self.search_widget)
        self.status_label = QLabel()
        layout.addWidget(self.status_label)
        layout.addStretch(1)
        self.setCentralWidget(container)
        self.search_widget.input.textChanged.connect(lambda _text: self.update_status())
        self._configure_shortcuts()
        self.update_status()

    def _configure_shortcuts(self) -> None:
        toggle_action = QAction(self)
        toggle_action.setShortcut(QKeySequence(Qt.Key_F11))
        toggle_action.triggered.connect(self.toggle_fullscreen)
        self.addAction(toggle_action)

    def toggle_fullscreen(self) -> None:
        if self.isFullScreen():
            self.showNormal()
        else:
            self.showFullScreen()

    def update_status(self) -> None:
        route = self.navigator.current or "/"
        contact = self.store.active_contact_id or "none"
        self.status_label.setText(f"Route: {route}    Contact: {contact}")

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self.search_widget.dispose()
        super().closeEvent(event)


def main() -> None:
    """Launch the desktop shell over the configured JSON snapshot."""

    settings = AppSettings.from_env()
    setup_logging(settings.log_level)
    app = QApplication(sys.argv)
    window = MainWindow(InMemoryEntityStore.from_file(settings.data_path), settings)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
