"""Currying, composition and partial application."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, NoReturn, overload

from fun_core.unit import Unit, unit

__all__ = [
    'apply',
    'apply_left',
    'compose',
    'compose_back',
    'curry',
    'flip',
    'func',
    'identity',
    'raise_',
    'uncurry',
]


def identity[T](value: T) -> T:
    """Return value unchanged."""
    return value


def raise_(exc: BaseException) -> NoReturn:
    """Raise exc from expression position.

    Example:
        ```python
        name = user.name if user else raise_(LookupError('no user'))
        ```
    """
    raise exc


def func[**P](action: Callable[P, Any]) -> Callable[P, Unit]:
    """Wrap a side-effecting callable so that it returns unit.

    Args:
        action: Callable whose return value is discarded.

    Returns:
        A callable with the same parameters returning unit.
    """

    @functools.wraps(action)
    def _func(*args: P.args, **kwargs: P.kwargs) -> Unit:
        action(*args, **kwargs)
        return unit

    return _func


def _positional_arity(f: Callable[..., Any]) -> int:
    """Count the required positional parameters of f."""
    params = inspect.signature(f).parameters.values()
    return sum(
        1
        for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    )


@overload
def curry[A, B, R](f: Callable[[A, B], R], arity: int | None = None) -> Callable[[A], Callable[[B], R]]: ...
@overload
def curry[A, B, C, R](
    f: Callable[[A, B, C], R], arity: int | None = None
) -> Callable[[A], Callable[[B], Callable[[C], R]]]: ...
@overload
def curry(f: Callable[..., Any], arity: int | None = None) -> Callable[[Any], Any]: ...


def curry(f: Callable[..., Any], arity: int | None = None) -> Callable[[Any], Any]:
    """Turn an n-ary function into a chain of unary functions.

    Args:
        f: Function to curry.
        arity: Number of arguments to collect. Defaults to the number of
            required positional parameters of f.

    Returns:
        f itself when the arity is below 2, otherwise a unary function
        returning unary functions until all arguments are collected.

    Example:
        ```python
        add3 = curry(lambda a, b, c: a + b + c)
        assert add3(1)(2)(3) == 6
        ```
    """
    n = _positional_arity(f) if arity is None else arity
    if n < 2:
        return f

    def _collect(collected: tuple[Any, ...]) -> Callable[[Any], Any]:
        def _step(arg: Any) -> Any:
            args = (*collected, arg)
            if len(args) == n:
                return f(*args)
            return _collect(args)

        return _step

    return _collect(())


def uncurry(f: Callable[[Any], Any], arity: int) -> Callable[..., Any]:
    """Turn a chain of unary functions back into an n-ary function.

    Args:
        f: Curried function.
        arity: Number of arguments the result accepts.

    Returns:
        A function of `arity` positional arguments.

    Raises:
        ValueError: If arity is below 1.
    """
    if arity < 1:
        raise ValueError(f'arity must be at least 1, got {arity}')

    def _uncurried(*args: Any) -> Any:
        if len(args) != arity:
            raise TypeError(f'expected {arity} arguments, got {len(args)}')
        result: Any = f
        for arg in args:
            result = result(arg)
        return result

    return _uncurried


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions right to left: compose(b, a)(x) == b(a(x))."""
    return compose_back(*reversed(fns))


def compose_back(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left to right: compose_back(a, b)(x) == b(a(x))."""
    if not fns:
        return identity

    def _composed(value: Any) -> Any:
        for fn in fns:
            value = fn(value)
        return value

    return _composed


def flip[A, B, R](f: Callable[[A], Callable[[B], R]]) -> Callable[[B], Callable[[A], R]]:
    """Swap the arguments of a curried binary function.

    Example:
        ```python
        minus = curry(lambda a, b: a - b)
        assert flip(minus)(1)(10) == 9
        ```
    """
    return lambda b: lambda a: f(a)(b)


def apply(f: Callable[..., Any], *args: Any) -> Callable[..., Any]:
    """Partially apply f from the left.

    Example:
        ```python
        greet = apply(lambda greeting, name: f'{greeting}, {name}', 'Hello')
        assert greet('Ada') == 'Hello, Ada'
        ```
    """
    return functools.partial(f, *args)


def apply_left[A, B, R](f: Callable[[A, B], R], last: B) -> Callable[[A], R]:
    """Fix the second argument of a binary function."""
    return lambda first: f(first, last)
