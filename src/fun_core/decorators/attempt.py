"""@attempt and @attempt_async: decorator forms of Result.try_."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from fun_core.compose.functions import identity
from fun_core.result import ExceptionTypes, Result

__all__ = ['attempt', 'attempt_async']


@overload
def attempt[**P, T](func: Callable[P, T], /) -> Callable[P, Result[T, Exception]]: ...
@overload
def attempt[**P, T, F](
    *,
    catch: ExceptionTypes = ...,
    fail_with: Callable[[BaseException], F] = ...,
) -> Callable[[Callable[P, T]], Callable[P, Result[T, F]]]: ...


def attempt(
    func: Callable[..., Any] | None = None,
    /,
    *,
    catch: ExceptionTypes = Exception,
    fail_with: Callable[[BaseException], Any] = identity,
) -> Any:
    """Decorator that returns a Result instead of raising.

    Calls go through Result.try_: a return value becomes a success (unit
    for None) and an exception of the `catch` family becomes a failure
    built by fail_with. Other exceptions propagate.

    Can be used with or without arguments:
        @attempt
        def risky(): ...

        @attempt(catch=(KeyError, ValueError), fail_with=str)
        def lookup(key): ...

    Args:
        func: The function to wrap (when used without parentheses).
        catch: Exception class or tuple of classes to convert. Defaults to Exception.
        fail_with: Builds the failure payload. Defaults to the exception itself.

    Returns:
        A wrapped function returning Result, or a decorator.

    Example:
        ```python
        @attempt(catch=ZeroDivisionError, fail_with=lambda e: 'division by zero')
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Result.succeed(5.0)
        assert divide(1, 0) == Result.fail('division by zero')
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, Any]:
        return Result.try_(lambda: wrapped(*args, **kwargs), catch, fail_with)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def attempt_async[**P, T](
    func: Callable[P, Awaitable[T]], /
) -> Callable[P, Awaitable[Result[T, Exception]]]: ...
@overload
def attempt_async[**P, T, F](
    *,
    catch: ExceptionTypes = ...,
    fail_with: Callable[[BaseException], F | Awaitable[F]] = ...,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Result[T, F]]]]: ...


def attempt_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    /,
    *,
    catch: ExceptionTypes = Exception,
    fail_with: Callable[[BaseException], Any] = identity,
) -> Any:
    """Async version of attempt, going through Result.try_async."""

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, Any]:
        return await Result.try_async(lambda: wrapped(*args, **kwargs), catch, fail_with)

    if func is not None:
        return wrapper(func)
    return wrapper
