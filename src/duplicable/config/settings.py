"""Configuration settings using Pydantic Settings.

Usage:
    from duplicable import DuplicabilityClassifier
    from duplicable.config import DuplicableSettings

    # Load from environment variables (DUPLICABLE_*)
    classifier = DuplicabilityClassifier.from_settings()

    # Or override with explicit values
    classifier = DuplicabilityClassifier.from_settings(DuplicableSettings(honor_hooks=False))
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class DuplicableSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for duplicability classifiers.

    Attributes:
        honor_hooks: Consult ``__duplicable__`` hooks declared on value types.
        warn_on_hook_error: Warn when a hook raises or returns a non-bool.

    Environment Variables:
        DUPLICABLE_HONOR_HOOKS
        DUPLICABLE_WARN_ON_HOOK_ERROR
    """

    model_config = SettingsConfigDict(
        env_prefix="DUPLICABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    honor_hooks: bool = True
    warn_on_hook_error: bool = True
