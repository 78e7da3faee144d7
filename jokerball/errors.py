from __future__ import annotations


class JokerballError(Exception):
    """Base class for rules-engine errors."""


class InvalidOperation(JokerballError):
    """A transition was requested in a state (or with an index) that forbids it.

    The game is left unchanged; the caller must fix the precondition first.
    """


class CoordinateOutOfRange(JokerballError, KeyError):
    """A coordinate that must be on the board was not found."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class InvalidEnumValue(JokerballError, ValueError):
    """A hex type or occupancy outside its closed enumeration."""
