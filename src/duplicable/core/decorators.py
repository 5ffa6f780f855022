"""Class decorators declaring whether instances may be copied.

Usage:
    @not_duplicable
    class Connection:
        ...

    @duplicable
    class Counter(int):
        ...

Declarations are inherited and a subclass may re-declare.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import overload


def _declare(cls: type, allowed: bool) -> type:
    if not isinstance(cls, type):
        raise TypeError(
            f"Duplicability can only be declared on classes, got {type(cls).__name__}. "
            f"Did you apply the decorator to an instance or function?"
        )

    def __duplicable__(self: object) -> bool:
        return allowed

    __duplicable__.__qualname__ = f"{cls.__qualname__}.__duplicable__"
    cls.__duplicable__ = __duplicable__  # type: ignore[attr-defined]
    return cls


@overload
def not_duplicable(cls: type) -> type: ...


@overload
def not_duplicable(cls: None = None) -> Callable[[type], type]: ...


def not_duplicable(cls: type | None = None) -> type | Callable[[type], type]:
    """Declare that instances of a class must not be copied.

    Supports both ``@not_duplicable`` and ``@not_duplicable()``.

    Raises:
        TypeError: If applied to something that is not a class.
    """
    if cls is None:
        return lambda c: _declare(c, False)
    return _declare(cls, False)


@overload
def duplicable(cls: type) -> type: ...


@overload
def duplicable(cls: None = None) -> Callable[[type], type]: ...


def duplicable(cls: type | None = None) -> type | Callable[[type], type]:
    """Declare that instances of a class may be copied.

    Overrides the category default, e.g. for a mutable ``int`` subclass.

    Raises:
        TypeError: If applied to something that is not a class.
    """
    if cls is None:
        return lambda c: _declare(c, True)
    return _declare(cls, True)
