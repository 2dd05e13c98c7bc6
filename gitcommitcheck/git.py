"""Read commit history from a git repository."""
from pathlib import Path
from typing import List, Optional, Union

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

from .exceptions import GitLogError, NotARepositoryError, PathNotFoundError
from .models import Commit

PathLike = Union[str, Path]


def validate_repo_path(path: PathLike) -> None:
    """Check that ``path`` exists and is the root of a git repository.

    Raises:
        PathNotFoundError: If the path does not exist
        NotARepositoryError: If the path has no ``.git`` entry
    """
    path = Path(path)
    if not path.exists():
        raise PathNotFoundError(path)
    if not (path / ".git").exists():
        raise NotARepositoryError(path)


def open_repo(path: PathLike) -> Repo:
    try:
        return Repo(path)
    except NoSuchPathError:
        raise PathNotFoundError(path) from None
    except InvalidGitRepositoryError:
        raise NotARepositoryError(path) from None


def fetch_commits(path: PathLike = ".", limit: Optional[int] = None) -> List[Commit]:
    """Fetch commits reachable from HEAD, newest first.

    Args:
        path: Path to the repository
        limit: Maximum number of commits to return (None for all)

    Returns:
        List[Commit]: Commit records with their subject lines
    """
    repo = open_repo(path)
    if limit == 0 or not repo.head.is_valid():
        return []

    try:
        return [
            Commit(
                hash=commit.hexsha,
                author_name=commit.author.name or "",
                author_email=commit.author.email or "",
                subject=_subject(commit.message),
            )
            for commit in repo.iter_commits("HEAD", max_count=limit)
        ]
    except GitCommandError as e:
        raise GitLogError(str(e.stderr).strip() or str(e)) from e


def count_commits(path: PathLike = ".") -> int:
    """Count all commits reachable from HEAD."""
    repo = open_repo(path)
    if not repo.head.is_valid():
        return 0
    try:
        return int(repo.git.rev_list("--count", "HEAD"))
    except GitCommandError as e:
        raise GitLogError(str(e.stderr).strip() or str(e)) from e


def get_current_branch(path: PathLike = ".") -> Optional[str]:
    """Return the checked-out branch name, or None when HEAD is detached."""
    repo = open_repo(path)
    if repo.head.is_detached:
        return None
    return repo.active_branch.name


def _subject(message: Union[str, bytes]) -> str:
    if isinstance(message, bytes):
        message = message.decode("utf-8", errors="replace")
    return message.split("\n", 1)[0].rstrip("\r")
