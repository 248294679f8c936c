"""
Shared Resources

A small registry handed to components at construction time. It carries the
logger they should write to and any shared singletons, keyed by type.
"""

import logging
import threading
from typing import Any, Optional


class Resources:
    """Typed registry of shared components plus the logger to use."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger('enterprise')
        self._generic = {}
        self._lock = threading.Lock()

    def logger(self) -> logging.Logger:
        return self._logger

    def set_generic(self, key: type, value: Any) -> None:
        """Register a value under a type key, replacing any previous value."""
        with self._lock:
            self._generic[key] = value

    def get_generic(self, key: type, default: Any = None) -> Any:
        with self._lock:
            return self._generic.get(key, default)
