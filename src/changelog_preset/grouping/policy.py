"""
Grouping and sorting of transformed commits.

:class:`GroupingPolicy` is the declarative configuration handed to the
changelog writer: commits are grouped by their section title, groups are
sorted by title, commits inside a group by scope then subject, note
groups by title and notes with a generic field comparator (title, then
text).
:func:`group_commits` and :func:`group_notes` apply a policy to a list of
transformed commits and return the groups in display order.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Tuple

from changelog_preset.grouping.group_model import CommitGroup, GroupedNote, NoteGroup, ParsedCommit


Comparator = Callable[[Any, Any], int]


def _field_value(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        value = item.get(name)
    else:
        value = getattr(item, name, None)
    return "" if value is None else value


def _compare(a: Any, b: Any) -> int:
    if a == b:
        return 0
    try:
        return -1 if a < b else 1
    except TypeError:
        # Mixed types: fall back to their text form so sorting never fails.
        sa, sb = str(a), str(b)
        return (sa > sb) - (sa < sb)


def compare_fields(*fields: str) -> Comparator:
    """Build a ``cmp``-style comparator over the given fields.

    Without fields the items themselves are compared. With fields, items
    are compared on each field in turn until one differs. Missing or
    ``None`` field values compare as empty strings.

    Examples
    --------
    >>> cmp = compare_fields("scope", "subject")
    >>> cmp({"scope": "a", "subject": "x"}, {"scope": "b", "subject": "a"})
    -1
    """

    def comparator(a: Any, b: Any) -> int:
        if not fields:
            return _compare(a, b)
        for name in fields:
            result = _compare(_field_value(a, name), _field_value(b, name))
            if result:
                return result
        return 0

    return comparator


@dataclass(frozen=True)
class GroupingPolicy:
    """Sort and group configuration for the changelog writer.

    Attributes
    ----------
    group_by : str
        Commit field used as the group key (the post-classification type).
    commit_groups_sort : str
        Field of a commit group to sort groups by.
    commits_sort : Tuple[str, ...]
        Commit fields to sort commits within a group by.
    note_groups_sort : str
        Field of a note group to sort note groups by.
    notes_sort : Comparator
        Comparator applied to notes within a note group.
    """

    group_by: str = "type"
    commit_groups_sort: str = "title"
    commits_sort: Tuple[str, ...] = ("scope", "subject")
    note_groups_sort: str = "title"
    notes_sort: Comparator = field(default_factory=lambda: compare_fields("title", "text"))

    def as_dict(self) -> Dict[str, Any]:
        """Export the policy with the writer's option names."""
        return {
            "groupBy": self.group_by,
            "commitGroupsSort": self.commit_groups_sort,
            "commitsSort": list(self.commits_sort),
            "noteGroupsSort": self.note_groups_sort,
            "notesSort": self.notes_sort,
        }


DEFAULT_POLICY = GroupingPolicy()


def _sorted(items: Iterable[Any], comparator: Comparator) -> List[Any]:
    return sorted(items, key=functools.cmp_to_key(comparator))


def group_commits(commits: Iterable[ParsedCommit], policy: GroupingPolicy = DEFAULT_POLICY) -> List[CommitGroup]:
    """Group transformed commits by ``policy.group_by`` and sort them."""
    groups: Dict[Any, CommitGroup] = {}
    for commit in commits:
        key = getattr(commit, policy.group_by, None)
        title = "" if key is None else key
        groups.setdefault(title, CommitGroup(title=title)).commits.append(commit)

    commits_cmp = compare_fields(*policy.commits_sort)
    for group in groups.values():
        group.commits = _sorted(group.commits, commits_cmp)
    return _sorted(groups.values(), compare_fields(policy.commit_groups_sort))


def group_notes(commits: Iterable[ParsedCommit], policy: GroupingPolicy = DEFAULT_POLICY) -> List[NoteGroup]:
    """Collect the notes of transformed commits into sorted note groups."""
    groups: Dict[str, NoteGroup] = {}
    for commit in commits:
        for note in commit.notes:
            grouped = GroupedNote(title=note.title, text=note.text, commit=commit)
            groups.setdefault(note.title, NoteGroup(title=note.title)).notes.append(grouped)

    for group in groups.values():
        group.notes = _sorted(group.notes, policy.notes_sort)
    return _sorted(groups.values(), compare_fields(policy.note_groups_sort))
