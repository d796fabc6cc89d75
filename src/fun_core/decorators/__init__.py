"""Decorators: comprehension blocks and exception-to-Result conversion."""

from fun_core.decorators.attempt import attempt, attempt_async
from fun_core.decorators.do import do, do_async

__all__ = ['attempt', 'attempt_async', 'do', 'do_async']
