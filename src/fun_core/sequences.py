"""Projections over iterables of Maybe and Result values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from fun_core.maybe import Maybe
from fun_core.result import Result

__all__ = [
    'collect',
    'collect_failure',
    'collect_some',
    'collect_success',
    'where_failed',
    'where_some',
    'where_successful',
]


def where_some[T](maybes: Iterable[Maybe[T]]) -> Iterator[T]:
    """Yield the payloads of the present Maybes, skipping empty ones."""
    return (maybe.value for maybe in maybes if maybe.has_value)


def where_successful[S, F](results: Iterable[Result[S, F]]) -> Iterator[S]:
    """Yield the success payloads, skipping failures."""
    return (result.success for result in results if result.is_successful)


def where_failed[S, F](results: Iterable[Result[S, F]]) -> Iterator[F]:
    """Yield the failure payloads, skipping successes."""
    return (result.failure for result in results if not result.is_successful)


def collect[T](*items: T) -> list[T]:
    """Gather the arguments into a list."""
    return list(items)


def collect_some[T](*maybes: Maybe[T]) -> list[T]:
    """Gather the payloads of the present Maybes into a list."""
    return list(where_some(maybes))


def collect_success[S, F](*results: Result[S, F]) -> list[S]:
    """Gather the success payloads into a list."""
    return list(where_successful(results))


def collect_failure[S, F](*results: Result[S, F]) -> list[F]:
    """Gather the failure payloads into a list."""
    return list(where_failed(results))
