"""
Top-level package for changelog_preset.

This package exposes the commit transform via
``changelog_preset.transform`` and the assembled parser and writer
options via ``changelog_preset.preset``.
"""

__all__ = ["__version__", "build_preset", "transform_commit"]

__version__ = "0.1.0"

from changelog_preset.preset import build_preset  # noqa: E402
from changelog_preset.transform import transform_commit  # noqa: E402
