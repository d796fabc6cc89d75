"""Error types raised when a container is misused.

These signal programming errors at the point of misuse: reading an empty
Maybe, reading the wrong branch of a Result, passing None where a handler
is mandatory. They are never converted into failure values by the library.
"""

from __future__ import annotations

__all__ = [
    'ArgumentNoneError',
    'EmptyMaybeError',
    'FailedMatchError',
    'ResultAccessError',
    'require',
]


class EmptyMaybeError(Exception):
    """The value of an empty Maybe was accessed."""

    def __init__(self) -> None:
        super().__init__(
            'Attempted to access the value of a Maybe when it was empty, '
            'you must ALWAYS check for a value before attempting to access it.'
        )


class ResultAccessError(Exception):
    """The inactive branch of a Result was accessed."""

    def __init__(self, branch: str) -> None:
        self.branch = branch
        if branch == 'success':
            message = "Can't access success on an unsuccessful result"
        else:
            message = "Can't access failure on a successful result"
        super().__init__(message)


class FailedMatchError(Exception):
    """No case of a Choice matched during an exhaustive match."""

    def __init__(self, case: int | None = None) -> None:
        self.case = case
        super().__init__(
            'Somehow, none of the cases were matched on this choice, '
            'this is spooky and should never happen. Good luck debugging!'
        )


class ArgumentNoneError(ValueError):
    """A mandatory argument was None."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None")


def require[T](value: T | None, argument: str) -> T:
    """Return value unchanged, raising ArgumentNoneError if it is None.

    Args:
        value: The value to check.
        argument: Parameter name reported in the error.

    Returns:
        The value, narrowed to non-None.

    Raises:
        ArgumentNoneError: If value is None.
    """
    if value is None:
        raise ArgumentNoneError(argument)
    return value
