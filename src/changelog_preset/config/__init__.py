"""
Configuration loading for changelog_preset.

Provides the writer :class:`Context` and a loader for the package
manifest it is built from. See :mod:`changelog_preset.config.loader` for
implementation details.
"""

from .loader import ConfigError, Context, load_context  # noqa: F401
