import unittest
from types import SimpleNamespace

from changelog_preset.grouping.group_model import Reference
from changelog_preset.issues.extractor import (
    clean_issues,
    extract_issues,
    issues_from_footer,
    issues_from_references,
)


class TestIssueExtractor(unittest.TestCase):
    def test_duplicate_references_are_collapsed(self) -> None:
        refs = [Reference(issue="A"), Reference(issue="A"), Reference(issue="B")]
        self.assertEqual(extract_issues(refs, None), ["A", "B"])

    def test_footer_tracker_keys(self) -> None:
        footer = "See ABC-123 and ABC-123, also XYZ-9"
        self.assertEqual(issues_from_footer(footer), ["ABC-123", "ABC-123", "XYZ-9"])
        self.assertEqual(extract_issues([], footer), ["ABC-123", "XYZ-9"])

    def test_footer_ignores_lowercase_keys(self) -> None:
        self.assertEqual(issues_from_footer("abc-1 Abc-2 AB-"), [])

    def test_empty_footer(self) -> None:
        self.assertEqual(issues_from_footer(None), [])
        self.assertEqual(issues_from_footer(""), [])

    def test_references_come_before_footer(self) -> None:
        refs = [Reference(issue="12")]
        self.assertEqual(extract_issues(refs, "Refs PROJ-7"), ["12", "PROJ-7"])

    def test_reference_and_footer_duplicates(self) -> None:
        refs = [Reference(issue="PROJ-7"), Reference(issue="3")]
        self.assertEqual(extract_issues(refs, "PROJ-7 PROJ-8"), ["PROJ-7", "3", "PROJ-8"])

    def test_invalid_candidates_are_dropped(self) -> None:
        refs = [Reference(issue=None), Reference(issue=""), Reference(issue=42), Reference(issue="5")]
        self.assertEqual(extract_issues(refs, None), ["5"])

    def test_leading_hash_is_stripped(self) -> None:
        self.assertEqual(clean_issues(["#1", "1", "#2"]), ["1", "2"])

    def test_references_without_issue_attribute(self) -> None:
        refs = [None, SimpleNamespace(raw="x"), SimpleNamespace(issue="9")]
        self.assertEqual(issues_from_references(refs), [None, None, "9"])
        self.assertEqual(extract_issues(refs, None), ["9"])

    def test_mapping_references(self) -> None:
        refs = [{"issue": "12"}, {"raw": "x"}, {"issue": "#12"}, Reference(issue="13")]
        self.assertEqual(issues_from_references(refs), ["12", None, "#12", "13"])
        self.assertEqual(extract_issues(refs, None), ["12", "13"])

    def test_input_is_not_mutated(self) -> None:
        refs = [Reference(issue="#1")]
        extract_issues(refs, "X-1")
        self.assertEqual(len(refs), 1)
        self.assertEqual(refs[0].issue, "#1")


if __name__ == "__main__":
    unittest.main()
