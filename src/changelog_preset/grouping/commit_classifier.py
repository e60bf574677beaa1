"""
Mapping of Conventional Commit types to changelog section titles.

Classification is an ordered rule table evaluated top to bottom; the
first rule that matches decides the outcome. One rule does not produce a
title but discards the commit: it sits between ``Reverts`` and
``Documentation``, so ``docs``, ``style``, ``refactor``, ``test`` and
``chore`` commits, as well as unknown types, only reach the changelog
when they carry at least one note. A kept commit whose type matches no
rule keeps its raw type as title.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

from changelog_preset.grouping.group_model import Note, ParsedCommit


BREAKING_CHANGES_TITLE = "BREAKING CHANGES"


@dataclass(frozen=True)
class ClassificationRule:
    """One row of the classification table.

    ``title`` is ``None`` for the discard rule. ``matches`` receives the
    commit type, the revert flag and whether the commit must be kept.
    """

    matches: Callable[[Optional[str], Any, bool], bool]
    title: Optional[str]


def _type_is(name: str) -> Callable[[Optional[str], Any, bool], bool]:
    return lambda commit_type, revert, keep: commit_type == name


CLASSIFICATION_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(_type_is("feat"), "Features"),
    ClassificationRule(_type_is("fix"), "Bug Fixes"),
    ClassificationRule(_type_is("perf"), "Performance Improvements"),
    ClassificationRule(lambda commit_type, revert, keep: commit_type == "revert" or bool(revert), "Reverts"),
    ClassificationRule(lambda commit_type, revert, keep: not keep, None),
    ClassificationRule(_type_is("docs"), "Documentation"),
    ClassificationRule(_type_is("style"), "Styles"),
    ClassificationRule(_type_is("refactor"), "Code Refactoring"),
    ClassificationRule(_type_is("test"), "Tests"),
    ClassificationRule(_type_is("chore"), "Chores"),
)


def mark_breaking_notes(notes: Iterable[Note]) -> bool:
    """Retitle every note as a breaking change.

    Returns
    -------
    bool
        ``True`` if there was at least one note, meaning the commit must
        not be discarded.
    """
    keep = False
    for note in notes:
        note.title = BREAKING_CHANGES_TITLE
        keep = True
    return keep


def classify_type(commit_type: Optional[str], revert: Any = None, keep: bool = False) -> Optional[str]:
    """Return the section title for a commit type.

    Parameters
    ----------
    commit_type : str, optional
        Raw type tag from the commit header (``feat``, ``fix``...).
    revert : Any
        Revert information from the parser; any truthy value marks a revert.
    keep : bool
        Whether the commit carries notes and must therefore be kept.

    Returns
    -------
    Optional[str]
        The section title, the unchanged ``commit_type`` when no rule
        applies, or ``None`` when the commit is to be discarded.
    """
    for rule in CLASSIFICATION_RULES:
        if rule.matches(commit_type, revert, keep):
            return rule.title
    return commit_type


def classify_commit(commit: ParsedCommit) -> Optional[str]:
    """Classify ``commit``, retitling its notes as breaking changes.

    The commit's type is not modified; the caller decides what to do with
    the returned title (``None`` means discard).
    """
    keep = mark_breaking_notes(commit.notes)
    return classify_type(commit.type, commit.revert, keep)
