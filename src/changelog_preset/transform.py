"""
Per-commit transform applied before grouping and rendering.

:func:`transform_commit` turns one parsed commit into a display-ready
record, or discards it. In order, it:

1. collects the commit's issues from its references and footer;
2. stores them as a comma-joined, formatted ``display_references`` string;
3. classifies the commit type into a section title, returning ``None``
   for discarded commits;
4. replaces the wildcard scope ``*`` with an empty scope;
5. shortens the hash to seven characters;
6. turns ``#id`` mentions in the subject into issue references.

The transform mutates the commit it is given and must be applied exactly
once per commit.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Union

from changelog_preset.config.loader import Context
from changelog_preset.grouping.commit_classifier import classify_commit
from changelog_preset.grouping.group_model import ParsedCommit
from changelog_preset.issues.extractor import extract_issues
from changelog_preset.issues.formatter import format_issue, format_issues


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


SCOPE_WILDCARD = "*"
SHORT_HASH_LENGTH = 7
SUBJECT_ISSUE_PATTERN = re.compile(r"#([a-zA-Z0-9\-]+)")


def rewrite_subject(subject: str, issue_url: Optional[str], issues: List[str]) -> str:
    """Replace ``#id`` mentions in ``subject`` with formatted issue references.

    Every mentioned id is appended to ``issues``.
    """

    def _replace(match: "re.Match[str]") -> str:
        issue = match.group(1)
        issues.append(issue)
        return format_issue(issue_url, issue)

    return SUBJECT_ISSUE_PATTERN.sub(_replace, subject)


def transform_commit(
    commit: ParsedCommit, context: Union[Context, Mapping[str, Any]]
) -> Optional[ParsedCommit]:
    """Normalize, classify and enrich a single parsed commit.

    Parameters
    ----------
    commit : ParsedCommit
        The commit produced by the parser. It is modified in place.
    context : Context or Mapping
        Writer context; its issue tracker URL controls link formatting.
        A plain mapping (``{"packageData": {...}}`` or the package data
        itself) is converted with :meth:`Context.from_dict`.

    Returns
    -------
    Optional[ParsedCommit]
        The transformed commit, or ``None`` if it should not appear in
        the changelog.
    """
    if not isinstance(context, Context):
        context = Context.from_dict(context)
    issue_url = context.issue_url

    issues = extract_issues(commit.references, commit.footer)
    commit.display_references = format_issues(issue_url, issues)

    title = classify_commit(commit)
    if title is None:
        logger.debug("Discarding commit %s of type %r", commit.hash, commit.type)
        return None
    commit.type = title

    if commit.scope == SCOPE_WILDCARD:
        commit.scope = ""

    if isinstance(commit.hash, str):
        commit.hash = commit.hash[:SHORT_HASH_LENGTH]

    if isinstance(commit.subject, str):
        # Subject mentions land in ``issues`` after display_references was
        # built, so they do not show up there.
        commit.subject = rewrite_subject(commit.subject, issue_url, issues)

    return commit


def transform_commits(
    commits: Iterable[ParsedCommit], context: Union[Context, Mapping[str, Any]]
) -> Iterator[ParsedCommit]:
    """Transform ``commits`` in order, yielding only those that are kept."""
    for commit in commits:
        transformed = transform_commit(commit, context)
        if transformed is not None:
            yield transformed
