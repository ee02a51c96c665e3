"""
Unit tests for Journal.
"""

import pytest

from core.domain.journal import Journal, JournalFormatError


class TestJournal:
    """Test entry bookkeeping and rendering."""

    def test_add_entry_returns_index(self):
        journal = Journal()
        assert journal.add_entry("Today was a great day!") == 1
        assert journal.add_entry("I made a new friend today") == 2
        assert journal.count == 2

    def test_str(self):
        journal = Journal()
        journal.add_entry("Today was a great day!")
        journal.add_entry("I made a new friend today")
        assert str(journal) == "1: Today was a great day!\n2: I made a new friend today"

    def test_empty_journal_renders_empty(self):
        assert str(Journal()) == ""
        assert len(Journal()) == 0

    def test_remove_entry(self):
        journal = Journal()
        journal.add_entry("a")
        journal.add_entry("b")
        journal.remove_entry(1)
        assert str(journal) == "2: b"
        assert len(journal) == 1

    def test_remove_missing_entry_is_noop(self):
        journal = Journal()
        journal.add_entry("a")
        journal.remove_entry(42)
        assert str(journal) == "1: a"

    def test_indices_not_reused_after_removal(self):
        journal = Journal()
        journal.add_entry("a")
        journal.remove_entry(1)
        assert journal.add_entry("b") == 2
        assert str(journal) == "2: b"

    @pytest.mark.parametrize("text", ["line one\nline two", "a\r\nb", "a\u2028b", "trailing\n"])
    def test_multiline_entry_rejected(self, text):
        journal = Journal()
        with pytest.raises(JournalFormatError):
            journal.add_entry(text)
        assert journal.count == 0
        assert len(journal) == 0

    def test_empty_entry_allowed(self):
        journal = Journal()
        assert journal.add_entry("") == 1
        assert Journal.from_text(str(journal)).entries == {1: "1: "}


class TestJournalFromText:
    """Test rebuilding a journal from its rendered form."""

    def test_parses_entries_and_resumes_count(self):
        journal = Journal.from_text("2: b\n5: e\n")
        assert journal.entries == {2: "2: b", 5: "5: e"}
        assert journal.count == 5
        assert journal.add_entry("f") == 6

    def test_blank_lines_ignored(self):
        journal = Journal.from_text("\n1: a\n\n")
        assert str(journal) == "1: a"

    def test_empty_text(self):
        journal = Journal.from_text("")
        assert journal.count == 0
        assert str(journal) == ""

    def test_bad_line_raises(self):
        with pytest.raises(JournalFormatError, match="line 2"):
            Journal.from_text("1: a\nnot an entry")

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            Journal.from_text("x: y")

    def test_repeated_index_raises(self):
        with pytest.raises(JournalFormatError, match="line 2 repeats index 1"):
            Journal.from_text("1: a\n1: b")
