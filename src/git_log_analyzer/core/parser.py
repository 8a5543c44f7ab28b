"""Parser for ``git log --pretty=format:%h|%an|%s`` output."""

from typing import List, Optional

from git_log_analyzer.models.commit import Commit

FIELD_SEPARATOR = "|"
FIELD_COUNT = 3


def parse_git_log(output: str) -> List[Commit]:
    """Parse git log output into commits, keeping input order.

    Lines that do not carry all three fields are skipped silently.
    """
    commits = []
    for line in output.splitlines():
        commit = parse_git_log_line(line)
        if commit is not None:
            commits.append(commit)
    return commits


def parse_git_log_line(line: str) -> Optional[Commit]:
    """Parse a single ``hash|author|subject`` line, or return None."""
    # The subject is the last field and may itself contain the separator
    parts = line.split(FIELD_SEPARATOR, FIELD_COUNT - 1)
    if len(parts) != FIELD_COUNT:
        return None

    commit_id, author, subject = parts
    if not commit_id or not author:
        return None
    return Commit(id=commit_id, author=author, subject=subject)
