from __future__ import annotations

from typing import Any, Dict, Optional


class MapConfigError(Exception):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PlayerCountError(MapConfigError):
    pass


class TopologyInvariantError(AssertionError):
    """A board shape that a valid hex grid can never produce.

    Raised from deep inside the topology core and never caught there: seeing one
    means the caller handed over malformed input or the core has a bug.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class IDOverflowError(TopologyInvariantError):
    pass


class CapacityError(TopologyInvariantError):
    pass
