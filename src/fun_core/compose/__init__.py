"""Composition utilities: currying, pipelines and memoization."""

from fun_core.compose.functions import (
    apply,
    apply_left,
    compose,
    compose_back,
    curry,
    flip,
    func,
    identity,
    raise_,
    uncurry,
)
from fun_core.compose.memoize import memoize, memoize_async
from fun_core.compose.pipe import (
    if_,
    if_async,
    lift_async,
    pipe,
    pipe_async,
    tee,
    tee_async,
    tee_ignore,
)

__all__ = [
    'apply',
    'apply_left',
    'compose',
    'compose_back',
    'curry',
    'flip',
    'func',
    'identity',
    'if_',
    'if_async',
    'lift_async',
    'memoize',
    'memoize_async',
    'pipe',
    'pipe_async',
    'raise_',
    'tee',
    'tee_async',
    'tee_ignore',
    'uncurry',
]
