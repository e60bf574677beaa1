"""
Extraction of issue identifiers from a parsed commit.

Issues come from two places: the structured references the parser
recognised (``Closes #12``) and tracker keys such as ``ABC-123`` written
anywhere in the commit footer. Both sources are merged, cleaned and
deduplicated while preserving the order in which they were found.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional

from changelog_preset.grouping.group_model import Reference


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# Tracker keys: upper-case project key, dash, number (e.g. ``ABC-123``).
TRACKER_ISSUE_PATTERN = re.compile(r"[A-Z]+-[0-9]+")


def _reference_issue(ref: Any) -> Any:
    if isinstance(ref, Mapping):
        return ref.get("issue")
    return getattr(ref, "issue", None)


def issues_from_references(references: Iterable[Optional[Reference]]) -> List[Any]:
    """Return the raw ``issue`` value of every reference, absent ones included.

    References may be :class:`Reference` objects, other objects with an
    ``issue`` attribute, or plain mappings with an ``"issue"`` key.
    """
    return [_reference_issue(ref) for ref in references]


def issues_from_footer(footer: Optional[str]) -> List[str]:
    """Return every tracker key found in ``footer``, in order, duplicates kept."""
    if not footer:
        return []
    return [match.group(0) for match in TRACKER_ISSUE_PATTERN.finditer(footer)]


def clean_issues(candidates: Iterable[Any]) -> List[str]:
    """Drop invalid candidates, strip a leading ``#`` and remove duplicates.

    Parameters
    ----------
    candidates : Iterable[Any]
        Issue candidates in discovery order.

    Returns
    -------
    List[str]
        Non-empty string identifiers; the first occurrence of each value
        is kept and relative order is preserved.
    """
    seen = set()
    issues: List[str] = []
    for candidate in candidates:
        if not candidate or not isinstance(candidate, str):
            continue
        issue = candidate[1:] if candidate.startswith("#") else candidate
        if issue in seen:
            continue
        seen.add(issue)
        issues.append(issue)
    return issues


def extract_issues(references: Iterable[Optional[Reference]], footer: Optional[str]) -> List[str]:
    """Collect the issues of a commit from its references and footer.

    The returned list is a new object; ``references`` is left untouched.
    """
    candidates = issues_from_references(references) + issues_from_footer(footer)
    issues = clean_issues(candidates)
    logger.debug("Extracted %d issue(s) from %d candidate(s)", len(issues), len(candidates))
    return issues
