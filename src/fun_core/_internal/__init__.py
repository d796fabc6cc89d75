"""Internal helpers shared across fun-core modules."""

from fun_core._internal.awaitables import resolve
from fun_core._internal.sync import KeyedOnceCache, Lazy, OnceCell

__all__ = ['KeyedOnceCache', 'Lazy', 'OnceCell', 'resolve']
