"""
Parser and writer options making up the changelog preset.

The commit parser is configured with :class:`ParserOptions`: a header
grammar of the form ``type(scope): subject``, the keywords that start a
breaking-change note and the pattern recognising revert commits. The
changelog writer is configured with :class:`WriterOptions`, which bundles
the per-commit transform with the grouping policy.
:func:`build_preset` assembles both into the mapping handed to the
changelog tooling.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from changelog_preset.grouping.group_model import ParsedCommit
from changelog_preset.grouping.policy import GroupingPolicy
from changelog_preset.transform import transform_commit


HEADER_PATTERN = re.compile(r"^(\w*)(?:\((.*)\))?\: (.*)$", re.ASCII)
REVERT_PATTERN = re.compile(
    r"^(?:Revert|revert:)\s\"?([\s\S]+?)\"?\s*This reverts commit (\w*)\.",
    re.IGNORECASE | re.ASCII,
)
NOTE_KEYWORDS = ("BREAKING CHANGE", "BREAKING CHANGES")


@dataclass(frozen=True)
class ParserOptions:
    """Grammar used by the commit parser to split a raw message into fields."""

    header_pattern: re.Pattern = HEADER_PATTERN
    header_correspondence: Tuple[str, ...] = ("type", "scope", "subject")
    note_keywords: Tuple[str, ...] = NOTE_KEYWORDS
    revert_pattern: re.Pattern = REVERT_PATTERN
    revert_correspondence: Tuple[str, ...] = ("header", "hash")

    def match_header(self, header: str) -> Optional[Dict[str, Optional[str]]]:
        """Split a header line into its named fields, or ``None`` if it does not match."""
        match = self.header_pattern.match(header)
        if match is None:
            return None
        return dict(zip(self.header_correspondence, match.groups()))

    def match_revert(self, message: str) -> Optional[Dict[str, Optional[str]]]:
        """Return the reverted header and hash if ``message`` is a revert."""
        match = self.revert_pattern.match(message)
        if match is None:
            return None
        return dict(zip(self.revert_correspondence, match.groups()))

    def as_dict(self) -> Dict[str, Any]:
        return {
            "headerPattern": self.header_pattern,
            "headerCorrespondence": list(self.header_correspondence),
            "noteKeywords": list(self.note_keywords),
            "revertPattern": self.revert_pattern,
            "revertCorrespondence": list(self.revert_correspondence),
        }


@dataclass(frozen=True)
class WriterOptions:
    """Transform and grouping configuration for the changelog writer."""

    transform: Callable[[ParsedCommit, Any], Optional[ParsedCommit]] = transform_commit
    policy: GroupingPolicy = field(default_factory=GroupingPolicy)

    def as_dict(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"transform": self.transform}
        options.update(self.policy.as_dict())
        return options


def build_preset(
    parser_options: Optional[ParserOptions] = None,
    writer_options: Optional[WriterOptions] = None,
) -> Dict[str, Any]:
    """Assemble the preset mapping.

    The mapping exposes the options at the top level and again under
    ``conventional_changelog`` for tools expecting them there.
    """
    parser_opts = (parser_options or ParserOptions()).as_dict()
    writer_opts = (writer_options or WriterOptions()).as_dict()
    return {
        "parser_opts": parser_opts,
        "writer_opts": writer_opts,
        "conventional_changelog": {
            "parser_opts": parser_opts,
            "writer_opts": writer_opts,
        },
    }
