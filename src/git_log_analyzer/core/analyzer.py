"""Aggregate queries over parsed git history."""

from collections import Counter
from typing import Iterable, List, Optional, Tuple

from git_log_analyzer.core.config import AnalyzerConfig
from git_log_analyzer.core.parser import parse_git_log
from git_log_analyzer.models.commit import Commit
from git_log_analyzer.models.report import AuthorCount


class GitLogAnalyzer:
    """Answers contributor and keyword questions about a fixed commit list.

    The three queries are independent and read-only:

    - ``top_authors``: authors ranked by commit count
    - ``find_commits_with_keywords``: commits whose subject mentions a keyword
    - ``all_authors_sorted``: distinct authors in alphabetical order
    """

    def __init__(
        self, commits: Iterable[Commit], config: Optional[AnalyzerConfig] = None
    ):
        self._commits: Tuple[Commit, ...] = tuple(commits)
        self.config = config or AnalyzerConfig()
        self._folded_keywords = [kw.casefold() for kw in self.config.keywords]

    @classmethod
    def from_log(
        cls, git_log_output: str, config: Optional[AnalyzerConfig] = None
    ) -> "GitLogAnalyzer":
        """Create an analyzer straight from raw git log output."""
        return cls(parse_git_log(git_log_output), config)

    @property
    def commits(self) -> Tuple[Commit, ...]:
        """Parsed commits in input order."""
        return self._commits

    def top_authors(self, limit: int) -> List[AuthorCount]:
        """Return up to ``limit`` authors with the most commits.

        Ties are broken by author name so the ranking is deterministic.
        """
        if limit <= 0:
            return []

        counts = Counter(commit.author for commit in self._commits)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [AuthorCount(name=name, commits=count) for name, count in ranked[:limit]]

    def find_commits_with_keywords(self) -> List[Commit]:
        """Return commits whose subject contains any keyword, ignoring case.

        With no keywords configured nothing matches.
        """
        return [
            commit
            for commit in self._commits
            if self._matches_keyword(commit.subject)
        ]

    def all_authors_sorted(self) -> List[str]:
        """Return each distinct author once, sorted by code point."""
        return sorted({commit.author for commit in self._commits})

    def _matches_keyword(self, subject: str) -> bool:
        folded = subject.casefold()
        return any(keyword in folded for keyword in self._folded_keywords)
