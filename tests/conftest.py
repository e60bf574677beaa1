import pytest

from changelog_preset.config.loader import Context
from changelog_preset.grouping.group_model import ParsedCommit


@pytest.fixture
def parsed_commits():
    """Parser output for a small release, as plain mappings."""
    records = [
        {
            "type": "feat",
            "scope": "api",
            "subject": "add search endpoint, closes #12",
            "hash": "1111111aaaaaaa",
            "references": [{"issue": "12", "action": "closes", "raw": "#12"}],
            "footer": "Implements SEARCH-4",
            "notes": [],
        },
        {
            "type": "fix",
            "scope": "*",
            "subject": "handle empty query",
            "hash": "2222222bbbbbbb",
            "references": [],
            "notes": [],
        },
        {
            "type": "chore",
            "scope": None,
            "subject": "bump dependencies",
            "hash": "3333333ccccccc",
            "references": [],
            "notes": [],
        },
        {
            "type": "refactor",
            "scope": "core",
            "subject": "drop legacy config",
            "hash": "4444444ddddddd",
            "references": [],
            "notes": [{"title": "BREAKING CHANGE", "text": "legacy config files are no longer read"}],
        },
    ]
    return [ParsedCommit.from_dict(record) for record in records]


@pytest.fixture
def tracker_context():
    return Context.from_dict({"packageData": {"bugs": {"url": "https://tracker.example.com/browse"}}})
