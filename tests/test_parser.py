"""Tests for git log parsing."""

import pytest
from pydantic import ValidationError

from git_log_analyzer.core.parser import parse_git_log, parse_git_log_line
from git_log_analyzer.models.commit import Commit

SAMPLE_LOG = (
    "a1b2c3d|Alice|Initialization: project setup\n"
    "e4f5g6h|Bob|Fill: Commit model\n"
    "i7j8k9l|Alice|Hotfix: urgent patch"
)


def test_parse_sample_log():
    """Test parsing well-formed lines keeps all fields and order."""
    commits = parse_git_log(SAMPLE_LOG)

    assert [c.id for c in commits] == ["a1b2c3d", "e4f5g6h", "i7j8k9l"]
    assert [c.author for c in commits] == ["Alice", "Bob", "Alice"]
    assert commits[0].subject == "Initialization: project setup"


def test_subject_keeps_separator():
    """Test that a subject containing '|' is preserved intact."""
    commit = parse_git_log_line("abc1234|Carol|Merge a|b into c|d")

    assert commit is not None
    assert commit.author == "Carol"
    assert commit.subject == "Merge a|b into c|d"


@pytest.mark.parametrize("line", ["", "onlyone", "onlytwo|fields"])
def test_malformed_lines_are_dropped(line):
    """Test that lines with fewer than three fields yield no commit."""
    assert parse_git_log_line(line) is None


def test_malformed_line_does_not_affect_others():
    """Test that a bad line is skipped while good lines are still parsed."""
    commits = parse_git_log("onlytwo|fields\n\na1b2c3d|Alice|Real commit\n")

    assert len(commits) == 1
    assert commits[0].id == "a1b2c3d"


def test_empty_subject_allowed():
    """Test that a trailing separator produces an empty subject."""
    commit = parse_git_log_line("a1b2c3d|Alice|")

    assert commit == Commit(id="a1b2c3d", author="Alice", subject="")


def test_empty_id_or_author_dropped():
    """Test that records missing an id or author are skipped."""
    assert parse_git_log_line("|Alice|subject") is None
    assert parse_git_log_line("a1b2c3d||subject") is None


def test_windows_line_endings():
    """Test CRLF output parses without stray carriage returns."""
    commits = parse_git_log("a1|Alice|one\r\nb2|Bob|two\r\n")

    assert [c.subject for c in commits] == ["one", "two"]


def test_empty_input():
    """Test that empty input gives an empty collection."""
    assert parse_git_log("") == []


def test_commit_is_immutable():
    """Test that parsed commits cannot be modified."""
    commit = parse_git_log_line("a1b2c3d|Alice|subject")

    with pytest.raises(ValidationError):
        commit.author = "Mallory"

    assert str(commit) == "a1b2c3d|Alice|subject"
