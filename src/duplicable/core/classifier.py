"""Duplicability classifier.

Answers "can I safely shallow-copy this?" without trying the copy. Probing with
``copy.copy`` inside ``try/except`` is far slower than a categorical check, and
the answer for the denied categories never changes.

Usage:
    from duplicable import is_duplicable

    snapshot = copy.copy(value) if is_duplicable(value) else value
"""

from __future__ import annotations

import numbers
import types
import warnings
from enum import Enum
from typing import TYPE_CHECKING, Any

from duplicable.core.models import ValueCategory

if TYPE_CHECKING:
    from duplicable.config import DuplicableSettings

# Ordered by specificity: bool and Enum members must win over numbers.Number.
_CATEGORY_RULES: tuple[tuple[type | tuple[type, ...], ValueCategory], ...] = (
    (Enum, ValueCategory.SYMBOL),
    ((int, float, complex, numbers.Number), ValueCategory.NUMERIC),
    (type, ValueCategory.TYPE),
    (types.ModuleType, ValueCategory.MODULE),
)


def _category_of(value: Any) -> ValueCategory:
    """Resolve the most specific category of a value.

    Args:
        value: Any object.

    Returns:
        The matching category, OBJECT when no denied category matches.
    """
    if value is None:
        return ValueCategory.NOTHING
    if value is True:
        return ValueCategory.TRUE
    if value is False:
        return ValueCategory.FALSE
    cls = type(value)  # not value.__class__, which proxies may spoof
    for kinds, category in _CATEGORY_RULES:
        if issubclass(cls, kinds):
            return category
    return ValueCategory.OBJECT


def _type_name(cls: type) -> str:
    """Qualified name of a class, read without going through its metaclass."""
    return type.__dict__["__qualname__"].__get__(cls)


class DuplicabilityClassifier:
    """Stateless classifier with fixed options.

    Args:
        honor_hooks: Consult ``__duplicable__`` declared on the value's type.
        warn_on_hook_error: Emit a RuntimeWarning when a hook raises or
            returns a non-bool. The category default is used either way.
    """

    __slots__ = ("_honor_hooks", "_warn_on_hook_error")

    def __init__(self, *, honor_hooks: bool = True, warn_on_hook_error: bool = True) -> None:
        self._honor_hooks = honor_hooks
        self._warn_on_hook_error = warn_on_hook_error

    @classmethod
    def from_settings(cls, settings: DuplicableSettings | None = None) -> DuplicabilityClassifier:
        """Build a classifier from settings.

        Args:
            settings: Optional settings (loaded from the environment if None).

        Returns:
            Classifier configured from the settings.
        """
        from duplicable.config import DuplicableSettings

        settings = settings or DuplicableSettings()
        return cls(
            honor_hooks=settings.honor_hooks,
            warn_on_hook_error=settings.warn_on_hook_error,
        )

    @property
    def honor_hooks(self) -> bool:
        """Whether ``__duplicable__`` hooks on value types are consulted."""
        return self._honor_hooks

    @property
    def warn_on_hook_error(self) -> bool:
        """Whether a failing hook emits a RuntimeWarning."""
        return self._warn_on_hook_error

    def classify(self, value: Any) -> ValueCategory:
        """Return the runtime category of a value. Never raises."""
        return _category_of(value)

    def is_duplicable(self, value: Any) -> bool:
        """Check whether a shallow copy of value is expected to succeed.

        A ``__duplicable__`` hook on the value's type takes precedence over
        the category default when hooks are honoured.

        Args:
            value: Any object.

        Returns:
            False for None, booleans, Enum members, numbers, classes and
            modules; True for everything else.
        """
        return self._resolve(value, stacklevel=2)

    def __call__(self, value: Any) -> bool:
        return self._resolve(value, stacklevel=2)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(honor_hooks={self._honor_hooks}, "
            f"warn_on_hook_error={self._warn_on_hook_error})"
        )

    def _resolve(self, value: Any, stacklevel: int) -> bool:
        """Answer for value. stacklevel is relative to the public entry point."""
        category = _category_of(value)
        if self._honor_hooks and category is not ValueCategory.TYPE:
            declared = self._declared(value, stacklevel + 1)
            if declared is not None:
                return declared
        return category.duplicable

    def _declared(self, value: Any, stacklevel: int) -> bool | None:
        """Call the type-level hook, if any. None means no usable answer."""
        cls = type(value)
        try:
            hook = getattr(cls, "__duplicable__", None)
        except Exception as exc:  # metaclass lookup may do anything
            self._report(cls, f"lookup raised {_type_name(type(exc))}", stacklevel + 1)
            return None
        if hook is None:
            return None
        try:
            result = hook(value)
        except Exception as exc:
            self._report(cls, f"raised {_type_name(type(exc))}", stacklevel + 1)
            return None
        if type(result) is not bool:
            self._report(cls, f"returned {_type_name(type(result))}", stacklevel + 1)
            return None
        return result

    def _report(self, cls: type, reason: str, stacklevel: int) -> None:
        # Only names read through type itself; user code may break anything else.
        if self._warn_on_hook_error:
            warnings.warn(
                f"{_type_name(cls)}.__duplicable__ {reason}; "
                f"falling back to the category default.",
                RuntimeWarning,
                stacklevel=stacklevel + 1,
            )


# Module-level classifier instance
_classifier = DuplicabilityClassifier()


def get_classifier() -> DuplicabilityClassifier:
    """Access the process-wide default classifier.

    Returns:
        Classifier that honours hooks and warns on hook errors.
    """
    return _classifier


def classify(value: Any) -> ValueCategory:
    """Return the runtime category of a value."""
    return _classifier.classify(value)


def is_duplicable(value: Any) -> bool:
    """Check whether a shallow copy of value is expected to succeed.

    >>> is_duplicable(None), is_duplicable(42), is_duplicable("text")
    (False, False, True)
    """
    return _classifier._resolve(value, stacklevel=2)
