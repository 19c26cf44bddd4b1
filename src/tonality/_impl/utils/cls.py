from __future__ import annotations

from typing import overload, Callable, Any, Self
import typing as t
import sys
from functools import partial, lru_cache
from threading import RLock

__all__ = [
    "cachedGetter",
    "lazyIsInstance",
    "NewHelperMixin",
]

_DUMMY = object()

type FGet[T, P] = Callable[[T], P]

if t.TYPE_CHECKING:  # pragma: no cover

    @overload
    def cachedGetter[T, P](fget: FGet[T, P]) -> FGet[T, P]: ...

    @overload
    def cachedGetter[T, P](key: str) -> Callable[[FGet[T, P]], FGet[T, P]]: ...


def _cachedGetter[T, P](fget: FGet[T, P], *, key: str = None) -> FGet[T, P]:
    if key is None:
        fname = fget.__name__
        if fname.startswith("__") and fname.endswith("__"):
            # "dunder" method
            key = f"_{fname[2:-2]}"
        else:
            key = f"_{fname}"

    def wrapper(self: T) -> P:
        with RLock():
            if (value := getattr(self, key, _DUMMY)) is _DUMMY:
                value = fget(self)
                setattr(self, key, value)
            return value

    wrapper.__name__ = fget.__name__
    wrapper.__doc__ = fget.__doc__
    return wrapper


def cachedGetter(arg1=None, *args, **kwargs):
    """
    Caches the result of a getter function on the instance. The cached value is stored in a
    private attribute with the same name as the getter function preceded by a leading
    underscore, or, when a key is specified, with the key as the attribute name.

    **Note**: make sure that the key is included in `__slots__` when using this decorator on
    a slotted class.
    """
    hasKey = False
    if isinstance(arg1, str):
        key = arg1
        hasKey = True
    elif "key" in kwargs:
        key = kwargs.pop("key")
        hasKey = True
    if hasKey:
        return partial(_cachedGetter, key=key)
    else:
        return _cachedGetter(arg1, *args, **kwargs)


def lazyIsInstance(obj: Any, clsName: str) -> bool:
    """
    Judges whether `obj` is an instance of a class with the given name. The target class
    doesn't need to be imported.
    """
    if "." in clsName:
        moduleName, clsName = clsName.rsplit(".", 1)
    else:
        moduleName = "__main__"
    if (module := sys.modules.get(moduleName, _DUMMY)) is not _DUMMY:
        cls = getattr(module, clsName)
        return isinstance(obj, cls)
    else:
        # `obj` cannot be an instance of a class defined in a module that has not been
        # imported. If so, how is `obj` created?
        return False


class NewHelperMixin:
    """
    Provides a cached `_newHelper()` constructor on top of the uncached `_newImpl()`.
    Subclasses must implement `_newImpl()` and only pass hashable arguments to it.
    """

    __slots__ = ()

    @classmethod
    def _newImpl(cls, *args) -> Self:
        raise NotImplementedError

    @classmethod
    @lru_cache
    def _newHelper(cls, *args) -> Self:
        return cls._newImpl(*args)
