"""fun-core: Maybe, Result and Choice containers for Python 3.13+.

Replace None checks and exceptions-as-control-flow with explicit
presence/absence and success/failure values, plus currying, composition
and pipeline helpers that work over plain values and awaitables.

Flat imports (preferred):
    from fun_core import Maybe, Result, Choice3, pipe, curry, do

Submodule imports (for organization):
    from fun_core.maybe import Maybe
    from fun_core.result import Result
    from fun_core.choice import Choice2, Choice3
    from fun_core.compose import compose, memoize
    from fun_core.async_ import AsyncMaybe, AsyncResult
"""

from fun_core._config import FunConfig, get_config, init
from fun_core._logging import configure_logging, get_logger

# Async
from fun_core.async_ import AsyncMaybe, AsyncResult

# Unions
from fun_core.choice import Choice, Choice2, Choice3, Choice4, Choice5, Choice6

# Composition
from fun_core.compose import (
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
    memoize,
    memoize_async,
    pipe,
    pipe_async,
    raise_,
    tee,
    tee_async,
    tee_ignore,
    uncurry,
)

# Decorators
from fun_core.decorators import attempt, attempt_async, do, do_async

# Errors
from fun_core.errors import (
    ArgumentNoneError,
    EmptyMaybeError,
    FailedMatchError,
    ResultAccessError,
)
from fun_core.maybe import Maybe, to_maybe, to_maybe_async
from fun_core.result import Result

# Sequences
from fun_core.sequences import (
    collect,
    collect_failure,
    collect_some,
    collect_success,
    where_failed,
    where_some,
    where_successful,
)
from fun_core.unit import Unit, ignore, or_unit, unit

__all__ = [
    # Errors
    'ArgumentNoneError',
    # Async
    'AsyncMaybe',
    'AsyncResult',
    # Unions
    'Choice',
    'Choice2',
    'Choice3',
    'Choice4',
    'Choice5',
    'Choice6',
    'EmptyMaybeError',
    'FailedMatchError',
    # Config
    'FunConfig',
    # Containers
    'Maybe',
    'Result',
    'ResultAccessError',
    'Unit',
    # Composition
    'apply',
    'apply_left',
    # Decorators
    'attempt',
    'attempt_async',
    # Sequences
    'collect',
    'collect_failure',
    'collect_some',
    'collect_success',
    'compose',
    'compose_back',
    'configure_logging',
    'curry',
    'do',
    'do_async',
    'flip',
    'func',
    'get_config',
    'get_logger',
    'identity',
    'if_',
    'if_async',
    'ignore',
    'init',
    'lift_async',
    'memoize',
    'memoize_async',
    'or_unit',
    'pipe',
    'pipe_async',
    'raise_',
    'tee',
    'tee_async',
    'tee_ignore',
    'to_maybe',
    'to_maybe_async',
    'uncurry',
    'unit',
    'where_failed',
    'where_some',
    'where_successful',
]

__version__ = '0.1.0'
