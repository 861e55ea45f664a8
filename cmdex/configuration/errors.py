"""Exceptions raised while locating or validating configuration."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a config file is missing, unreadable or invalid."""
