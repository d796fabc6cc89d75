"""Unit: the value returned where a function has nothing to return."""

from __future__ import annotations

from typing import Final

import msgspec

__all__ = ['Unit', 'ignore', 'or_unit', 'unit']


class Unit(msgspec.Struct, frozen=True, gc=False):
    """The single value of the empty tuple type.

    Used as the result of side-effecting handlers so that every match,
    tee or try call produces a value. All instances are equal and share
    one hash; use the `unit` singleton rather than constructing new ones.

    Examples:
        >>> unit == Unit()
        True
        >>> str(unit)
        '()'
    """

    def __repr__(self) -> str:
        return '()'

    def __str__(self) -> str:
        return '()'


unit: Final[Unit] = Unit()


def ignore(_value: object) -> Unit:
    """Discard a value and return unit."""
    return unit


def or_unit[T](value: T | None) -> T | Unit:
    """Return value, or unit when value is None."""
    return unit if value is None else value
