"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from duplicable import DuplicabilityClassifier, not_duplicable


@pytest.fixture
def classifier():
    """Fresh classifier with default options."""
    return DuplicabilityClassifier()


@not_duplicable
class FixtureHandle:
    """Stands in for an OS resource that must not be copied."""

    def __init__(self, fd: int) -> None:
        self.fd = fd


@pytest.fixture
def handle_cls():
    return FixtureHandle
