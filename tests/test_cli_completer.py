"""Tests for ScribeCompleter."""

import pytest

from prompt_toolkit.document import Document

from cli.completer import ScribeCompleter
from cli.constants import COMMANDS


@pytest.fixture
def completer():
    return ScribeCompleter()


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """
    Create a working directory with a few files and chdir into it.
    """
    (tmp_path / "report.pdf").write_text("content")
    (tmp_path / "notes.txt").write_text("content")
    (tmp_path / ".hidden").write_text("content")
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "draft.md").write_text("content")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def get_completions_list(completer, text):
    """Helper to get list of completion texts from completer."""
    doc = Document(text, len(text))
    return [c.text for c in completer.get_completions(doc, None)]


class TestCommandCompletion:
    def test_empty_input_shows_all_commands(self, completer):
        assert get_completions_list(completer, "") == COMMANDS

    def test_partial_command_filters(self, completer):
        assert get_completions_list(completer, "re") == ["register"]

    def test_case_insensitive(self, completer):
        assert "verify" in get_completions_list(completer, "VE")

    def test_no_match(self, completer):
        assert get_completions_list(completer, "xyz") == []


class TestPathCompletion:
    def test_identifier_position_not_completed(self, completer, workspace):
        assert get_completions_list(completer, "add ") == []

    def test_lists_visible_entries(self, completer, workspace):
        completions = get_completions_list(completer, "add bafy123 ")
        assert completions == ["docs/", "notes.txt", "report.pdf"]

    def test_prefix_filters(self, completer, workspace):
        assert get_completions_list(completer, "add bafy123 re") == ["report.pdf"]

    def test_hidden_entries_need_dot(self, completer, workspace):
        assert get_completions_list(completer, "add bafy123 .h") == [".hidden"]

    def test_descends_into_directories(self, completer, workspace):
        assert get_completions_list(completer, "add bafy123 docs/") == ["docs/draft.md"]

    def test_missing_directory(self, completer, workspace):
        assert get_completions_list(completer, "add bafy123 nowhere/") == []

    def test_other_commands_have_no_argument_completion(self, completer, workspace):
        assert get_completions_list(completer, "verify ") == []

    def test_no_completion_past_path(self, completer, workspace):
        assert get_completions_list(completer, "add bafy123 report.pdf ") == []
