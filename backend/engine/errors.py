"""Exceptions raised by the calculation engine.

Both calculators validate their inputs up front and raise one of these
before any computation runs.  Degenerate-but-legitimate financial states
(zero initial cost, never-recovered investments) are *not* errors; they
produce sentinel values instead.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


class InvalidInputError(ValueError):
    """A caller-supplied value is outside its permitted domain."""


class UnknownFinancingTypeError(InvalidInputError):
    """The financing variant is not one of the four supported kinds."""


class UnknownRateScheduleError(KeyError):
    """No rate or financing schedule is registered under the given version."""

    def __str__(self) -> str:
        # KeyError repr-quotes its argument by default
        return str(self.args[0]) if self.args else ""


def require_positive(name: str, value: float) -> None:
    """Raise :class:`InvalidInputError` unless *value* > 0."""
    if not value > 0:
        raise InvalidInputError(f"{name} must be > 0, got {value}")


def require_non_negative(name: str, value: float) -> None:
    """Raise :class:`InvalidInputError` unless *value* >= 0."""
    if not value >= 0:
        raise InvalidInputError(f"{name} must be >= 0, got {value}")


def parse_enum(enum_cls: type[E], value: E | str, name: str) -> E:
    """Coerce *value* to a member of *enum_cls*.

    Raises :class:`InvalidInputError` listing the accepted values.
    """
    try:
        return enum_cls(value)
    except ValueError:
        available = ", ".join(m.value for m in enum_cls)
        raise InvalidInputError(
            f"{name} must be one of {available}, got {value!r}"
        ) from None
