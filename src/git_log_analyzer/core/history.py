"""Reading raw history from git."""

from pathlib import Path
from typing import Callable

import git
from git import Repo

GIT_LOG_FORMAT = "--pretty=format:%h|%an|%s"

# Anything that turns a repository path into raw ``hash|author|subject`` lines
HistorySource = Callable[[Path], str]


class HistoryError(RuntimeError):
    """Raised when git history cannot be read."""


def read_git_log(repo_path: Path) -> str:
    """Return ``git log`` output for the repository at ``repo_path``.

    Raises:
        HistoryError: If the path is not a git repository, git fails, or the
            repository has no commits.
    """
    repo_path = Path(repo_path)
    try:
        repo = Repo(repo_path, search_parent_directories=True)
    except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
        raise HistoryError(f"Not a git repository: {repo_path}") from e

    try:
        output = repo.git.log(GIT_LOG_FORMAT, "--encoding=UTF-8")
    except git.exc.GitCommandError as e:
        raise HistoryError(f"git log failed: {e}") from e
    finally:
        repo.close()

    if not output.strip():
        raise HistoryError(f"No commits in repository: {repo_path}")
    return output
