# Path: config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes settings models and the logging bootstrap.

from .logging import setup_logging
from .settings import AppSettings, SearchSettings

__all__ = ["AppSettings", "SearchSettings", "setup_logging"]
