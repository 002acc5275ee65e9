# Path: gui/widgets/__init__.py
# Purpose: Package initializer for reusable Qt widgets.
# Layer: gui.
# Details: Imports PySide6; keep it out of gui/__init__ so view models load without Qt.

from .global_search import GlobalSearchWidget, QtPointerEventSource

__all__ = ["GlobalSearchWidget", "QtPointerEventSource"]
