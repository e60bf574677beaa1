"""
Data models for parsed commits and changelog groups.

A :class:`ParsedCommit` is produced once per raw commit by the commit
parser, enriched by :func:`changelog_preset.transform.transform_commit`,
and finally collected into :class:`CommitGroup` and :class:`NoteGroup`
instances which the template renderer consumes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


@dataclass
class Reference:
    """A structured issue reference found by the parser.

    Attributes
    ----------
    issue : Any
        The referenced issue identifier. Usually a string such as ``"42"``
        or ``"#42"``, but parsers may leave it empty or use another type.
    action : str, optional
        Closing keyword preceding the reference (``Closes``, ``Fixes``...).
    owner, repository : str, optional
        Repository coordinates for cross-repository references.
    raw : str
        The reference text as it appeared in the message.
    prefix : str
        Issue prefix recognised by the parser.
    """

    issue: Any = None
    action: Optional[str] = None
    owner: Optional[str] = None
    repository: Optional[str] = None
    raw: str = ""
    prefix: str = "#"


@dataclass
class Note:
    """A commit note such as a ``BREAKING CHANGE`` paragraph."""

    title: str
    text: str = ""


@dataclass
class ParsedCommit:
    """A commit record as emitted by the commit parser.

    ``references`` always holds the raw :class:`Reference` list. The
    comma-joined display form computed by the transform is stored in
    ``display_references`` and exported as ``references`` by
    :meth:`as_template_data`.

    ``hash`` and ``subject`` are typed loosely because parsers may leave
    them unset or fill them with non-string values; the transform only
    normalizes string values.
    """

    type: Optional[str] = None
    scope: Optional[str] = None
    subject: Any = None
    hash: Any = None
    header: Optional[str] = None
    body: Optional[str] = None
    footer: Optional[str] = None
    references: List[Reference] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)
    mentions: List[str] = field(default_factory=list)
    revert: Any = None
    display_references: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ParsedCommit":
        """Build a commit from the parser's plain mapping output.

        References and notes may be given as mappings, as already
        constructed :class:`Reference` / :class:`Note` objects, or as any
        object exposing the same attributes.
        Unknown keys are ignored.
        """
        references = [
            ref if isinstance(ref, Reference) else _reference_from(ref)
            for ref in data.get("references") or []
        ]
        notes = [
            note if isinstance(note, Note) else _note_from(note)
            for note in data.get("notes") or []
        ]
        return cls(
            type=data.get("type"),
            scope=data.get("scope"),
            subject=data.get("subject"),
            hash=data.get("hash"),
            header=data.get("header"),
            body=data.get("body"),
            footer=data.get("footer"),
            references=references,
            notes=notes,
            mentions=list(data.get("mentions") or []),
            revert=data.get("revert"),
        )

    def as_template_data(self) -> Dict[str, Any]:
        """Return the record in the shape the template renderer expects."""
        return {
            "type": self.type,
            "scope": self.scope,
            "subject": self.subject,
            "hash": self.hash,
            "header": self.header,
            "body": self.body,
            "footer": self.footer,
            "references": self.display_references if self.display_references is not None else "",
            "notes": [{"title": note.title, "text": note.text} for note in self.notes],
            "mentions": list(self.mentions),
            "revert": self.revert,
        }


def _read(data: Any, name: str, default: Any = None) -> Any:
    if isinstance(data, Mapping):
        return data.get(name, default)
    return getattr(data, name, default)


def _reference_from(data: Any) -> Reference:
    if data is None:
        return Reference()
    return Reference(
        issue=_read(data, "issue"),
        action=_read(data, "action"),
        owner=_read(data, "owner"),
        repository=_read(data, "repository"),
        raw=_read(data, "raw", ""),
        prefix=_read(data, "prefix", "#"),
    )


def _note_from(data: Any) -> Note:
    return Note(title=_read(data, "title", ""), text=_read(data, "text", ""))


@dataclass
class CommitGroup:
    """Commits sharing one section title.

    Attributes
    ----------
    title : str
        Section title such as ``"Features"`` or ``"Bug Fixes"``.
    commits : List[ParsedCommit]
        Transformed commits in display order.
    """

    title: str
    commits: List[ParsedCommit] = field(default_factory=list)


@dataclass
class NoteGroup:
    """Notes sharing one title, each paired with the commit it came from."""

    title: str
    notes: List["GroupedNote"] = field(default_factory=list)


@dataclass
class GroupedNote:
    title: str
    text: str
    commit: ParsedCommit
