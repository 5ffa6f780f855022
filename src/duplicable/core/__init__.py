"""Core functionalities: stateless value classification.

Architecture Note:
    core/ holds pure functions and immutable objects only. Nothing here copies
    values or keeps state between calls.
"""

from duplicable.core.classifier import (
    DuplicabilityClassifier,
    classify,
    get_classifier,
    is_duplicable,
)
from duplicable.core.decorators import duplicable, not_duplicable
from duplicable.core.models import (
    NON_DUPLICABLE_CATEGORIES,
    SupportsDuplicable,
    ValueCategory,
)

__all__ = [
    # Models
    "ValueCategory",
    "NON_DUPLICABLE_CATEGORIES",
    "SupportsDuplicable",
    # Classifier
    "DuplicabilityClassifier",
    "classify",
    "get_classifier",
    "is_duplicable",
    # Decorators
    "duplicable",
    "not_duplicable",
]
