"""duplicable: cheap check for whether a value can be shallow-copied.

Usage:
    import copy

    from duplicable import is_duplicable, not_duplicable

    snapshot = copy.copy(value) if is_duplicable(value) else value

    @not_duplicable
    class Connection:
        ...

    is_duplicable(Connection())  # False
"""

__version__ = "0.1.0"

from duplicable.core import (
    NON_DUPLICABLE_CATEGORIES,
    DuplicabilityClassifier,
    SupportsDuplicable,
    ValueCategory,
    classify,
    duplicable,
    get_classifier,
    is_duplicable,
    not_duplicable,
)

__all__ = [
    # Version
    "__version__",
    # Predicate
    "is_duplicable",
    "classify",
    "get_classifier",
    "DuplicabilityClassifier",
    # Models
    "ValueCategory",
    "NON_DUPLICABLE_CATEGORIES",
    "SupportsDuplicable",
    # Declarations
    "duplicable",
    "not_duplicable",
]
