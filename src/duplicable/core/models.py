"""Duplicability models: value categories and the override protocol.

A value category is decided from the runtime type of a value alone, never from
its contents. Only a fixed set of categories is denied; everything else is
duplicable.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Protocol, runtime_checkable


class ValueCategory(Enum):
    """Runtime category of a value, as far as copying is concerned."""

    NOTHING = auto()  # None
    FALSE = auto()
    TRUE = auto()
    SYMBOL = auto()  # Enum members
    NUMERIC = auto()  # numbers.Number
    TYPE = auto()  # class objects
    MODULE = auto()  # module objects
    OBJECT = auto()  # everything else

    @property
    def duplicable(self) -> bool:
        """Whether values of this category can be meaningfully copied."""
        return self not in NON_DUPLICABLE_CATEGORIES


NON_DUPLICABLE_CATEGORIES: frozenset[ValueCategory] = frozenset(
    {
        ValueCategory.NOTHING,
        ValueCategory.FALSE,
        ValueCategory.TRUE,
        ValueCategory.SYMBOL,
        ValueCategory.NUMERIC,
        ValueCategory.TYPE,
        ValueCategory.MODULE,
    }
)


@runtime_checkable
class SupportsDuplicable(Protocol):
    """Class-level override of the category default.

    Looked up on ``type(value)``, like other special methods.
    """

    def __duplicable__(self) -> bool: ...
