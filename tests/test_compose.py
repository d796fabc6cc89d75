"""Tests for currying, composition and pipeline helpers."""

import asyncio
import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fun_core import (
    apply,
    apply_left,
    compose,
    compose_back,
    curry,
    flip,
    func,
    identity,
    if_,
    if_async,
    lift_async,
    pipe,
    pipe_async,
    raise_,
    tee,
    tee_async,
    tee_ignore,
    uncurry,
    unit,
)
from tests.strategies import int_functions, integers


def add3(a, b, c):
    return a + b + c


class TestCurry:
    """Tests for curry and uncurry."""

    def test_curry_infers_arity(self):
        """curry collects one argument at a time."""
        assert curry(add3)(1)(2)(3) == 6

    def test_curry_partial_chains_are_reusable(self):
        """Intermediate curried functions can be reused."""
        add_one = curry(add3)(1)
        assert add_one(2)(3) == 6
        assert add_one(10)(20) == 31

    def test_curry_explicit_arity(self):
        """An explicit arity overrides inspection."""
        concat = curry(lambda *parts: ''.join(parts), 4)
        assert concat('a')('b')('c')('d') == 'abcd'

    def test_curry_unary_unchanged(self):
        """Functions of arity below 2 are returned as-is."""
        assert curry(abs) is abs

    def test_curry_builtin(self):
        """Builtins with signatures can be curried."""
        assert curry(operator.sub)(10)(3) == 7

    @pytest.mark.parametrize('arity', [2, 3, 4, 5, 6, 7])
    def test_uncurry_inverts_curry(self, arity):
        """uncurry(curry(f), n)(*args) == f(*args)."""

        def total(*args):
            return sum(args)

        args = tuple(range(1, arity + 1))
        assert uncurry(curry(total, arity), arity)(*args) == total(*args)

    def test_uncurry_checks_argument_count(self):
        """uncurry rejects the wrong number of arguments."""
        with pytest.raises(TypeError):
            uncurry(curry(add3), 3)(1, 2)
        with pytest.raises(ValueError):
            uncurry(identity, 0)


class TestCompose:
    """Tests for compose, compose_back and flip."""

    @given(integers, int_functions, int_functions)
    def test_compose_right_to_left(self, value, a, b):
        """compose(b, a)(x) == b(a(x))."""
        assert compose(b, a)(value) == b(a(value))

    @given(integers, int_functions, int_functions)
    def test_compose_back_left_to_right(self, value, a, b):
        """compose_back(a, b)(x) == b(a(x))."""
        assert compose_back(a, b)(value) == b(a(value))

    def test_compose_empty_is_identity(self):
        """Composing nothing gives identity."""
        assert compose()(5) == 5
        assert compose_back()(5) == 5

    def test_flip(self):
        """flip swaps curried arguments."""
        minus = curry(operator.sub)
        assert flip(minus)(1)(10) == 9


class TestPartialApplication:
    """Tests for apply and apply_left."""

    def test_apply_from_left(self):
        """apply fixes leading arguments."""
        assert apply(add3, 1)(2, 3) == 6
        assert apply(add3, 1, 2)(3) == 6

    def test_apply_left_fixes_last(self):
        """apply_left fixes the second argument."""
        assert apply_left(operator.sub, 1)(10) == 9


class TestHelpers:
    """Tests for func, identity and raise_."""

    def test_func_returns_unit(self, calls):
        """func wraps an action to return unit."""
        wrapped = func(calls.append)
        assert wrapped(1) is unit
        assert calls == [1]

    @given(st.integers() | st.text())
    def test_identity(self, value):
        """identity returns its argument."""
        assert identity(value) == value

    def test_raise_only_when_selected(self):
        """raise_ raises only when evaluated."""
        value = 'x' if True else raise_(RuntimeError())
        assert value == 'x'
        with pytest.raises(RuntimeError):
            _ = raise_(RuntimeError()) if True else 'x'


class TestPipe:
    """Tests for pipe and pipe_async."""

    def test_pipe(self):
        """pipe threads a value left to right."""
        assert pipe(5, lambda x: x + 1, lambda x: x * 2) == 12
        assert pipe(5) == 5

    @pytest.mark.asyncio
    async def test_pipe_async_mixed(self):
        """pipe_async accepts an awaitable value and mixed steps."""

        async def inc(x: int) -> int:
            await asyncio.sleep(0)
            return x + 1

        assert await pipe_async(lift_async(5), inc, lambda x: x * 2) == 12

    @pytest.mark.asyncio
    async def test_pipe_async_sequential(self, calls):
        """Each step finishes before the next starts."""

        def step(name):
            async def _step(x):
                calls.append(f'{name} start')
                await asyncio.sleep(0)
                calls.append(f'{name} end')
                return x

            return _step

        await pipe_async(1, step('a'), step('b'))
        assert calls == ['a start', 'a end', 'b start', 'b end']

    @pytest.mark.asyncio
    async def test_lift_async(self):
        """lift_async returns the value unchanged."""
        assert await lift_async('value') == 'value'


class TestIf:
    """Tests for if_ and if_async."""

    def test_if_branches(self, thrower):
        """Exactly one branch runs."""
        assert if_(4, lambda x: x % 2 == 0, lambda x: 'even', thrower) == 'even'
        assert if_(3, lambda x: x % 2 == 0, thrower, lambda x: 'odd') == 'odd'

    @pytest.mark.asyncio
    async def test_if_async_mixed(self):
        """if_async accepts async predicates, branches and values."""

        async def is_even(x: int) -> bool:
            return x % 2 == 0

        async def label(x: int) -> str:
            return f'even {x}'

        assert await if_async(lift_async(4), is_even, label, lambda x: 'odd') == 'even 4'
        assert await if_async(3, is_even, label, lambda x: 'odd') == 'odd'


class TestTee:
    """Tests for tee, tee_async and tee_ignore."""

    def test_tee_returns_value(self, calls):
        """tee runs the action and returns the input."""
        assert tee(3, calls.append) == 3
        assert calls == [3]

    def test_tee_ignore_discards_result(self):
        """tee_ignore discards the function's return value."""
        assert tee_ignore(3, lambda x: x * 100) == 3

    def test_tee_ignore_is_tee(self):
        """tee_ignore and tee are one function."""
        assert tee_ignore is tee

    @pytest.mark.asyncio
    async def test_tee_async_awaits_in_order(self, calls):
        """The value completes before the side effect starts."""

        async def produce() -> str:
            await asyncio.sleep(0.01)
            calls.append('value')
            return 'v'

        async def effect(v: str) -> None:
            calls.append(f'effect {v}')

        assert await tee_async(produce(), effect) == 'v'
        assert calls == ['value', 'effect v']

    @pytest.mark.asyncio
    async def test_tee_async_sync_action(self, calls):
        """tee_async accepts a sync action."""
        assert await tee_async(lift_async(1), calls.append) == 1
        assert calls == [1]
