"""
Rendering of issue identifiers for the changelog.
"""

from __future__ import annotations

from typing import Iterable, Optional


def format_issue(issue_url: Optional[str], issue: str) -> str:
    """Format an issue as plain text or as a Markdown link.

    Parameters
    ----------
    issue_url : str, optional
        Base URL of the issue tracker. When falsy the issue is printed
        as-is, otherwise it becomes a link to ``{issue_url}/{issue}``.
    issue : str
        The issue identifier, without a leading ``#``.

    Returns
    -------
    str
        ``#42`` or ``[#42](https://tracker/issues/42)``.

    Examples
    --------
    >>> format_issue(None, "42")
    '#42'
    >>> format_issue("https://x/issues", "42")
    '[#42](https://x/issues/42)'
    """
    if issue_url:
        return f"[#{issue}]({issue_url}/{issue})"
    return f"#{issue}"


def format_issues(issue_url: Optional[str], issues: Iterable[str]) -> str:
    """Format each issue and join them with ``", "``."""
    return ", ".join(format_issue(issue_url, issue) for issue in issues)
