"""Choice: a closed tagged union over two to six candidate types.

A Choice holds exactly one value together with a 1-based case number
recording which candidate type it belongs to. Subscripting a Choice class
with concrete types gives a specialized class that can pick the case from
the value's type, so call sites can build one from a bare value:

    ```python
    Shape = Choice3[Circle, Square, Triangle]

    def area(shape: Choice3[Circle, Square, Triangle]) -> float:
        return shape.match(
            case1=lambda c: math.pi * c.radius**2,
            case2=lambda s: s.side**2,
            case3=lambda t: t.base * t.height / 2,
        )

    area(Shape(Square(side=2)))
    ```

`match` has two shapes. Passing every `caseN` handler dispatches
exhaustively. Passing `case_else` plus a subset of named handlers (one to
three of them, and always fewer than arity - 1) dispatches the named cases
and funnels every other case to `case_else`.
"""

from __future__ import annotations

import types
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from fun_core._logging import get_logger
from fun_core.errors import FailedMatchError, require
from fun_core.unit import or_unit

__all__ = ['Choice', 'Choice2', 'Choice3', 'Choice4', 'Choice5', 'Choice6']

logger = get_logger(__name__)

MAX_NAMED_CASES = 3

_specializations: dict[tuple[type, tuple[Any, ...]], type] = {}


def _type_name(candidate: Any) -> str:
    if isinstance(candidate, type):
        return candidate.__qualname__
    return repr(candidate)


def _accepts(candidate: Any, value: object) -> bool:
    """Check whether value belongs to a candidate type at runtime."""
    if candidate is Any or candidate is object:
        return True
    if candidate is None or candidate is type(None):
        return value is None
    origin = typing.get_origin(candidate)
    if origin is typing.Union or origin is types.UnionType:
        return any(_accepts(arg, value) for arg in typing.get_args(candidate))
    if origin is typing.Literal:
        return value in typing.get_args(candidate)
    if isinstance(origin, type):
        return isinstance(value, origin)
    if isinstance(candidate, type):
        return isinstance(value, candidate)
    return False


def _is_exact(candidate: Any, value: object) -> bool:
    origin = typing.get_origin(candidate)
    return type(value) is (origin if isinstance(origin, type) else candidate)


def _is_concrete(param: Any) -> bool:
    return not isinstance(param, (typing.TypeVar, typing.ParamSpec, typing.TypeVarTuple))


@dataclass(slots=True, frozen=True, init=False, repr=False, eq=False)
class Choice:
    """Base class for Choice2 ... Choice6.

    Instances are immutable. Two choices are equal when they have the same
    arity and candidate types, hold the same case and hold equal values.
    Choices over a different ordering of candidate types never compare
    equal.
    """

    __match_args__ = ('case', 'value')

    __arity__: ClassVar[int] = 0
    __candidates__: ClassVar[tuple[Any, ...] | None] = None

    _case: int
    _value: Any

    def __class_getitem__(cls, params: Any) -> Any:
        if not isinstance(params, tuple):
            params = (params,)
        if cls.__arity__ == 0 or cls.__candidates__ is not None:
            raise TypeError(f'{cls.__name__} cannot be subscripted')
        if len(params) != cls.__arity__:
            raise TypeError(
                f'{cls.__name__} takes {cls.__arity__} candidate types, got {len(params)}'
            )
        if not all(_is_concrete(p) for p in params):
            return types.GenericAlias(cls, params)

        key = (cls, params)
        specialized = _specializations.get(key)
        if specialized is None:
            name = f'{cls.__name__}[{", ".join(_type_name(p) for p in params)}]'
            specialized = type(
                name,
                (cls,),
                {
                    '__slots__': (),
                    '__candidates__': params,
                    '__module__': cls.__module__,
                    '__qualname__': name,
                },
            )
            _specializations[key] = specialized
        return specialized

    def __init__(self, value: Any) -> None:
        """Build a Choice from a bare value, picking the case by its type.

        An exact type match wins; otherwise the first candidate the value
        is an instance of, in declaration order.

        Raises:
            TypeError: If the class is not specialized or no candidate fits.
        """
        candidates = type(self).__candidates__
        if candidates is None:
            raise TypeError(
                f'{type(self).__name__} needs candidate types to infer the case; '
                f'subscript it or use {type(self).__name__}.from_case()'
            )
        case = self._resolve_case(candidates, value)
        object.__setattr__(self, '_case', case)
        object.__setattr__(self, '_value', value)

    @staticmethod
    def _resolve_case(candidates: Sequence[Any], value: object) -> int:
        for index, candidate in enumerate(candidates, 1):
            if _is_exact(candidate, value):
                return index
        for index, candidate in enumerate(candidates, 1):
            if _accepts(candidate, value):
                return index
        names = ', '.join(_type_name(c) for c in candidates)
        raise TypeError(f'{type(value).__name__} is not one of the candidate types ({names})')

    @classmethod
    def from_case(cls, case: int, value: Any) -> Any:
        """Build a Choice holding value as the given 1-based case.

        Args:
            case: Case number, from 1 to the arity.
            value: The payload.

        Raises:
            ValueError: If case is out of range.
            TypeError: If the class is specialized and value does not fit
                the candidate type of that case.
        """
        if not 1 <= case <= cls.__arity__:
            raise ValueError(f'case must be between 1 and {cls.__arity__}, got {case}')
        if cls.__candidates__ is not None and not _accepts(cls.__candidates__[case - 1], value):
            raise TypeError(
                f'{type(value).__name__} does not fit case {case} '
                f'({_type_name(cls.__candidates__[case - 1])})'
            )
        instance = object.__new__(cls)
        object.__setattr__(instance, '_case', case)
        object.__setattr__(instance, '_value', value)
        return instance

    @property
    def case(self) -> int:
        """The 1-based number of the active case."""
        return self._case

    @property
    def value(self) -> Any:
        """The payload of the active case."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Choice) or self.__arity__ != other.__arity__:
            return NotImplemented
        mine, theirs = type(self).__candidates__, type(other).__candidates__
        if mine is not None and theirs is not None and mine != theirs:
            return NotImplemented
        return self._case == other._case and bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((self.__arity__, self._case, self._value))

    def __repr__(self) -> str:
        return f'{type(self).__name__}.from_case({self._case}, {self._value!r})'

    def _match(
        self,
        handlers: tuple[Callable[[Any], Any] | None, ...],
        case_else: Callable[[], Any] | None,
    ) -> Any:
        if case_else is None:
            for index, handler in enumerate(handlers, 1):
                require(handler, f'case{index}')
            if 1 <= self._case <= len(handlers):
                return or_unit(handlers[self._case - 1](self._value))  # type: ignore[misc]
            logger.error('choice.match.failed', choice=type(self).__name__, case=self._case)
            raise FailedMatchError(self._case)

        named = sum(1 for handler in handlers if handler is not None)
        limit = min(MAX_NAMED_CASES, self.__arity__ - 2)
        if not 1 <= named <= limit:
            if limit < 1:
                raise TypeError(f'{type(self).__name__}.match does not accept case_else')
            raise TypeError(
                f'{type(self).__name__}.match with case_else takes 1 to {limit} '
                f'named cases, got {named}'
            )
        if 1 <= self._case <= len(handlers):
            handler = handlers[self._case - 1]
            if handler is not None:
                return or_unit(handler(self._value))
        return or_unit(case_else())


class Choice2[T1, T2](Choice):
    """One value of either T1 or T2."""

    __slots__ = ()
    __arity__ = 2

    def match[R](
        self,
        case1: Callable[[T1], R] | None = None,
        case2: Callable[[T2], R] | None = None,
    ) -> R:
        """Dispatch to the handler of the active case.

        Raises:
            ArgumentNoneError: If a handler is missing.
            FailedMatchError: If the case number is out of range.
        """
        return self._match((case1, case2), None)


class Choice3[T1, T2, T3](Choice):
    """One value of T1, T2 or T3."""

    __slots__ = ()
    __arity__ = 3

    def match[R](
        self,
        case1: Callable[[T1], R] | None = None,
        case2: Callable[[T2], R] | None = None,
        case3: Callable[[T3], R] | None = None,
        *,
        case_else: Callable[[], R] | None = None,
    ) -> R:
        """Dispatch to the handler of the active case.

        Without case_else all three handlers are required. With case_else,
        exactly one named handler is given and every other case goes to
        case_else.

        Raises:
            ArgumentNoneError: If a handler is missing in an exhaustive match.
            FailedMatchError: If the case number is out of range.
            TypeError: If the partial form names the wrong number of cases.
        """
        return self._match((case1, case2, case3), case_else)


class Choice4[T1, T2, T3, T4](Choice):
    """One value of T1, T2, T3 or T4."""

    __slots__ = ()
    __arity__ = 4

    def match[R](
        self,
        case1: Callable[[T1], R] | None = None,
        case2: Callable[[T2], R] | None = None,
        case3: Callable[[T3], R] | None = None,
        case4: Callable[[T4], R] | None = None,
        *,
        case_else: Callable[[], R] | None = None,
    ) -> R:
        """Dispatch to the handler of the active case.

        Partial form: case_else plus one or two named handlers.
        """
        return self._match((case1, case2, case3, case4), case_else)


class Choice5[T1, T2, T3, T4, T5](Choice):
    """One value of T1 through T5."""

    __slots__ = ()
    __arity__ = 5

    def match[R](
        self,
        case1: Callable[[T1], R] | None = None,
        case2: Callable[[T2], R] | None = None,
        case3: Callable[[T3], R] | None = None,
        case4: Callable[[T4], R] | None = None,
        case5: Callable[[T5], R] | None = None,
        *,
        case_else: Callable[[], R] | None = None,
    ) -> R:
        """Dispatch to the handler of the active case.

        Partial form: case_else plus one to three named handlers.
        """
        return self._match((case1, case2, case3, case4, case5), case_else)


class Choice6[T1, T2, T3, T4, T5, T6](Choice):
    """One value of T1 through T6."""

    __slots__ = ()
    __arity__ = 6

    def match[R](
        self,
        case1: Callable[[T1], R] | None = None,
        case2: Callable[[T2], R] | None = None,
        case3: Callable[[T3], R] | None = None,
        case4: Callable[[T4], R] | None = None,
        case5: Callable[[T5], R] | None = None,
        case6: Callable[[T6], R] | None = None,
        *,
        case_else: Callable[[], R] | None = None,
    ) -> R:
        """Dispatch to the handler of the active case.

        Partial form: case_else plus one to three named handlers.
        """
        return self._match((case1, case2, case3, case4, case5, case6), case_else)
