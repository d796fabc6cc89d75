"""@do and @do_async decorators for generator-based comprehensions."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any, ParamSpec, TypeVar

import wrapt

from fun_core.maybe import Maybe
from fun_core.result import Result
from fun_core.unit import or_unit

__all__ = ['do', 'do_async']

P = ParamSpec('P')
T = TypeVar('T')

type Container = Maybe[Any] | Result[Any, Any]


def _check_kind(kind: type | None, container: Container) -> type:
    current = Maybe if isinstance(container, Maybe) else Result
    if kind is not None and kind is not current:
        raise TypeError(f'cannot mix Maybe and Result in one block, got {container!r}')
    return current


def _is_stop(container: Container) -> bool:
    if isinstance(container, Maybe):
        return not container.has_value
    return not container.is_successful


def _payload(container: Container) -> Any:
    if isinstance(container, Maybe):
        return container.value
    return container.success


def _wrap(kind: type | None, value: Any) -> Container:
    if kind is Maybe:
        return Maybe(value)
    return Result.succeed(or_unit(value))


def do(
    func: Callable[P, Generator[Any, Any, T]],
) -> Callable[P, Any]:
    """Decorator for comprehension-style chaining of Maybe or Result.

    Yield a Maybe or Result to get its payload back. The first empty Maybe
    or failed Result ends the block and is returned as-is, so later steps
    never run. The generator's return value is wrapped in the kind of
    container that was yielded: Maybe(value), or Result.succeed(value)
    (unit for None).

    Args:
        func: A generator function that yields containers and returns T.

    Returns:
        A function returning a Maybe or Result.

    Raises:
        TypeError: If a block yields both Maybes and Results.

    Example:
        ```python
        @do
        def total(order_id: int):
            order = yield find_order(order_id)      # Maybe[Order]
            customer = yield find_customer(order)   # Maybe[Customer]
            return order.amount * customer.discount
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Generator[Any, Any, T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Container:
        gen = wrapped(*args, **kwargs)
        kind: type | None = None
        try:
            step = next(gen)
            while True:
                if isinstance(step, Maybe | Result):
                    kind = _check_kind(kind, step)
                    if _is_stop(step):
                        gen.close()
                        return step
                    value = _payload(step)
                else:
                    value = step
                step = gen.send(value)
        except StopIteration as e:
            return _wrap(kind, e.value)

    return wrapper(func)  # type: ignore[return-value]


def do_async(
    func: Callable[P, AsyncGenerator[Any, Any]],
) -> Callable[P, Any]:
    """Async decorator for comprehension-style chaining of Maybe or Result.

    Works like @do over an async generator. Async generators cannot return
    a value, so the last yielded container is the result.

    Args:
        func: An async generator function that yields containers.

    Returns:
        An async function returning a Maybe or Result.

    Example:
        ```python
        @do_async
        async def profile(user_id: int):
            user = yield await fetch_user(user_id)
            settings = yield await fetch_settings(user)
            yield Result.succeed(Profile(user, settings))
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, AsyncGenerator[Any, Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Container:
        gen = wrapped(*args, **kwargs)
        kind: type | None = None
        last: Container | None = None
        try:
            step = await gen.asend(None)
            while True:
                if isinstance(step, Maybe | Result):
                    kind = _check_kind(kind, step)
                    if _is_stop(step):
                        await gen.aclose()
                        return step
                    last = step
                    value = _payload(step)
                else:
                    value = step
                step = await gen.asend(value)
        except StopAsyncIteration:
            if last is not None:
                return last
            return _wrap(kind, None)

    return wrapper(func)
