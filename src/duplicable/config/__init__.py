"""Configuration module using Pydantic Settings.

Usage:
    from duplicable.config import DuplicableSettings

    settings = DuplicableSettings(honor_hooks=False)
"""

from duplicable.config.settings import DuplicableSettings

__all__ = [
    "DuplicableSettings",
]
