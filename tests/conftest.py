import pytest
from pathlib import Path
from git import Actor, Repo

from gitcommitcheck.models import Commit

AUTHOR = Actor("Test Author", "test@example.com")


def make_repo(path, subjects):
    """Initialize a repository at path with one commit per subject, oldest first."""
    repo = Repo.init(path)
    test_file = Path(path) / "test.txt"
    for index, subject in enumerate(subjects):
        test_file.write_text(f"content {index}")
        repo.index.add(["test.txt"])
        repo.index.commit(subject, author=AUTHOR, committer=AUTHOR)
    return repo


@pytest.fixture
def make_commit():
    """Factory for in-memory commits."""
    def _make(subject, hash="a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4e5f6a1b2"):
        return Commit(
            hash=hash,
            author_name="Test Author",
            author_email="test@example.com",
            subject=subject,
        )
    return _make


@pytest.fixture
def temp_git_repo(tmp_path):
    """Create a temporary git repository with a mix of good and bad subjects."""
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    make_repo(repo_dir, [
        "feat: add OAuth2 login support for admin users #412",
        "fix bug",
        "WIP: quick thing",
    ])
    yield repo_dir


@pytest.fixture
def clean_git_repo(tmp_path):
    """Create a temporary git repository whose history passes every rule."""
    repo_dir = tmp_path / "clean"
    repo_dir.mkdir()
    make_repo(repo_dir, [
        "feat: add OAuth2 login support for admin users #412",
        "docs(readme): describe the release checklist GH-7",
    ])
    yield repo_dir


@pytest.fixture
def empty_git_repo(tmp_path):
    """Create a temporary git repository without any commits."""
    repo_dir = tmp_path / "empty"
    repo_dir.mkdir()
    Repo.init(repo_dir)
    yield repo_dir


@pytest.fixture
def git_repo_factory(tmp_path):
    """Factory for repositories with the given subjects, oldest first."""
    def _make(subjects, name="custom"):
        repo_dir = tmp_path / name
        repo_dir.mkdir()
        return make_repo(repo_dir, subjects)
    return _make
