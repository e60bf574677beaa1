"""
Classification and grouping of parsed commits.

This package maps commit types to changelog sections and groups the
resulting commits for rendering. See
:mod:`changelog_preset.grouping.commit_classifier`,
:mod:`changelog_preset.grouping.group_model` and
:mod:`changelog_preset.grouping.policy` for details.
"""

from .commit_classifier import classify_commit, classify_type  # noqa: F401
from .group_model import CommitGroup, Note, NoteGroup, ParsedCommit, Reference  # noqa: F401
from .policy import GroupingPolicy, group_commits, group_notes  # noqa: F401
