"""
Error types raised by the Quoridor engine.

The engine mutates permissively: applying an illegal but well-formed action never
raises. These errors cover input that cannot be interpreted at all (bad text,
player numbers with no storage, unusable configurations).
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class QuoridorError(ValueError):
    """Base class for engine errors. ``code`` is a stable machine-readable tag."""
    code: str = 'QUORIDOR_ERROR'

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        return {'code': self.code, 'error': self.message, 'context': self.context}


class InvalidActionFormat(QuoridorError):
    """Text that is not a coordinate, a pawn move or a wall placement."""
    code = 'INVALID_ACTION_FORMAT'


class PlayerOutOfRange(QuoridorError):
    code = 'PLAYER_OUT_OF_RANGE'


class UnsupportedPlayerCount(QuoridorError):
    code = 'UNSUPPORTED_PLAYER_COUNT'


class InvalidBoardSize(QuoridorError):
    code = 'INVALID_BOARD_SIZE'


class InvalidSnapshot(QuoridorError):
    """A JSON snapshot is missing fields or holds values of the wrong shape."""
    code = 'INVALID_SNAPSHOT'
