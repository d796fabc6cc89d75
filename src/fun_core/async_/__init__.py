"""Awaitable wrappers for chaining Maybe and Result over pending computations."""

from fun_core.async_.maybe import AsyncMaybe
from fun_core.async_.result import AsyncResult

__all__ = ['AsyncMaybe', 'AsyncResult']
