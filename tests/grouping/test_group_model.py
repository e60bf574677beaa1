import unittest
from types import SimpleNamespace

from changelog_preset.grouping.group_model import CommitGroup, Note, ParsedCommit, Reference


class TestGroupModel(unittest.TestCase):
    def test_from_dict(self) -> None:
        commit = ParsedCommit.from_dict(
            {
                "type": "feat",
                "scope": "api",
                "subject": "add endpoint",
                "hash": "abcdef123456",
                "references": [{"issue": "12", "action": "Closes", "raw": "#12"}, None],
                "notes": [{"title": "BREAKING CHANGE", "text": "removed v1"}],
                "unknown": "ignored",
            }
        )
        self.assertEqual(commit.type, "feat")
        self.assertEqual(commit.references[0], Reference(issue="12", action="Closes", raw="#12"))
        self.assertIsNone(commit.references[1].issue)
        self.assertEqual(commit.notes, [Note(title="BREAKING CHANGE", text="removed v1")])
        self.assertIsNone(commit.revert)

    def test_from_dict_keeps_objects(self) -> None:
        ref = Reference(issue="1")
        note = Note(title="t")
        commit = ParsedCommit.from_dict({"references": [ref], "notes": [note]})
        self.assertIs(commit.references[0], ref)
        self.assertIs(commit.notes[0], note)

    def test_from_dict_attribute_objects(self) -> None:
        commit = ParsedCommit.from_dict(
            {
                "references": [SimpleNamespace(issue="9"), SimpleNamespace(raw="#x")],
                "notes": [SimpleNamespace(title="BREAKING CHANGE", text="gone")],
            }
        )
        self.assertEqual(commit.references[0], Reference(issue="9"))
        self.assertIsNone(commit.references[1].issue)
        self.assertEqual(commit.references[1].raw, "#x")
        self.assertEqual(commit.notes, [Note(title="BREAKING CHANGE", text="gone")])

    def test_template_data_exports_display_references(self) -> None:
        commit = ParsedCommit(type="Features", references=[Reference(issue="1")])
        self.assertEqual(commit.as_template_data()["references"], "")
        commit.display_references = "#1"
        data = commit.as_template_data()
        self.assertEqual(data["references"], "#1")
        self.assertEqual(data["type"], "Features")
        # raw references are kept on the record itself
        self.assertEqual(commit.references, [Reference(issue="1")])

    def test_commit_group_dataclass(self) -> None:
        group = CommitGroup(title="Features")
        self.assertEqual(group.commits, [])


if __name__ == "__main__":
    unittest.main()
