"""Tests for Unit and the error types."""

import pytest

from fun_core import (
    ArgumentNoneError,
    EmptyMaybeError,
    FailedMatchError,
    Maybe,
    Result,
    ResultAccessError,
    Unit,
    ignore,
    or_unit,
    unit,
)
from fun_core.errors import require


class TestUnit:
    """Tests for Unit."""

    def test_all_units_equal(self):
        """Every Unit equals every other Unit."""
        assert Unit() == unit
        assert hash(Unit()) == hash(unit)
        assert len({Unit(), unit}) == 1

    def test_representation(self):
        """Unit renders as the empty tuple."""
        assert repr(unit) == '()'
        assert str(unit) == '()'

    def test_immutable(self):
        """Unit is frozen."""
        with pytest.raises(AttributeError):
            unit.value = 1  # type: ignore[attr-defined]

    def test_ignore(self):
        """ignore discards any value."""
        assert ignore(42) is unit
        assert ignore(None) is unit

    def test_or_unit(self):
        """or_unit swaps only None for unit."""
        assert or_unit(None) is unit
        assert or_unit(0) == 0
        assert or_unit('') == ''


class TestErrors:
    """Tests for the misuse errors."""

    def test_empty_maybe_message(self):
        """Reading an empty Maybe explains how to avoid it."""
        with pytest.raises(EmptyMaybeError, match='ALWAYS check for a value'):
            _ = Maybe.empty().value

    def test_result_access_messages(self):
        """Each wrong-branch read names the branch."""
        with pytest.raises(ResultAccessError, match="Can't access success") as info:
            _ = Result.fail('e').success
        assert info.value.branch == 'success'
        with pytest.raises(ResultAccessError, match="Can't access failure"):
            _ = Result.succeed(1).failure

    def test_failed_match_keeps_case(self):
        """FailedMatchError records the offending case."""
        error = FailedMatchError(7)
        assert error.case == 7
        assert 'should never happen' in str(error)

    def test_argument_none_is_value_error(self):
        """ArgumentNoneError is a ValueError naming the argument."""
        error = ArgumentNoneError('mapper')
        assert isinstance(error, ValueError)
        assert error.argument == 'mapper'
        assert 'mapper' in str(error)

    def test_require(self):
        """require passes values through and rejects None."""
        assert require(0, 'x') == 0
        with pytest.raises(ArgumentNoneError):
            require(None, 'x')

    def test_none_handler_rejected(self):
        """Mandatory handlers are checked before any work."""
        with pytest.raises(ArgumentNoneError):
            Maybe(1).map(None)  # type: ignore[arg-type]
        with pytest.raises(ArgumentNoneError):
            Result.succeed(1).match(None, str)  # type: ignore[arg-type]
