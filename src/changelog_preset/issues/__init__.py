"""
Issue handling for changelog_preset.

This package finds issue identifiers in parsed commits and renders them
for display. See :mod:`changelog_preset.issues.extractor` and
:mod:`changelog_preset.issues.formatter` for details.
"""

from .extractor import extract_issues  # noqa: F401
from .formatter import format_issue, format_issues  # noqa: F401
