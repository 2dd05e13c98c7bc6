from pathlib import Path

import pytest
from git import Repo

from gitcommitcheck.config import Config, ConfigLayer
from gitcommitcheck.core import CommitAnalyzer
from gitcommitcheck.exceptions import NotARepositoryError, PathNotFoundError
from gitcommitcheck.models import ValidationKind
from gitcommitcheck.observers import FileLogObserver


def test_analyzer_rejects_missing_path(tmp_path):
    with pytest.raises(PathNotFoundError):
        CommitAnalyzer(tmp_path / "missing")


def test_analyzer_rejects_plain_directory(tmp_path):
    with pytest.raises(NotARepositoryError):
        CommitAnalyzer(tmp_path)


def test_analyze_reports_problem_commits(temp_git_repo):
    report = CommitAnalyzer(temp_git_repo).analyze()

    assert not report.skipped
    assert report.analyzed_count == 3
    assert report.total_count == 3
    assert report.threshold == 30
    assert [r.commit.subject for r in report.results] == ["WIP: quick thing", "fix bug"]
    assert report.results[0].kinds[0] is ValidationKind.WIP_COMMIT
    assert report.has_errors
    assert report.should_fail()


def test_analyze_clean_history(clean_git_repo):
    report = CommitAnalyzer(clean_git_repo).analyze()
    assert report.analyzed_count == 2
    assert report.results == []
    assert not report.should_fail(strict=True)


def test_analyze_with_limit(temp_git_repo):
    report = CommitAnalyzer(temp_git_repo).analyze(limit=1)
    assert report.analyzed_count == 1
    assert report.total_count == 3
    assert [r.commit.subject for r in report.results] == ["WIP: quick thing"]


def test_analyze_empty_repository(empty_git_repo):
    report = CommitAnalyzer(empty_git_repo).analyze()
    assert report.total_count == 0
    assert report.results == []


def test_analyze_uses_config(temp_git_repo):
    config = Config().apply_layer(ConfigLayer(disable=["wip"], threshold=5))
    report = CommitAnalyzer(temp_git_repo, config).analyze()

    assert report.threshold == 5
    assert not report.has_errors
    assert all(ValidationKind.WIP_COMMIT not in r.kinds for r in report.results)


def test_branch_filter_skips_other_branches(temp_git_repo):
    Repo(temp_git_repo).git.checkout("-b", "feature/login")
    config = Config().apply_layer(ConfigLayer(branches=["main", "release/*"]))

    report = CommitAnalyzer(temp_git_repo, config).analyze()

    assert report.skipped
    assert report.branch == "feature/login"
    assert report.analyzed_count == 0
    assert not report.should_fail(strict=True)


def test_branch_filter_validates_matching_branch(temp_git_repo):
    Repo(temp_git_repo).git.checkout("-b", "release/1.0")
    config = Config().apply_layer(ConfigLayer(branches=["main", "release/*"]))

    report = CommitAnalyzer(temp_git_repo, config).analyze()

    assert not report.skipped
    assert report.branch == "release/1.0"
    assert report.analyzed_count == 3


def test_detached_head_is_always_validated(temp_git_repo):
    repo = Repo(temp_git_repo)
    repo.git.checkout(repo.head.commit.hexsha)
    config = Config().apply_layer(ConfigLayer(branches=["main"]))

    report = CommitAnalyzer(temp_git_repo, config).analyze()

    assert not report.skipped
    assert report.branch is None
    assert report.analyzed_count == 3


def test_analyzer_with_file_observer(temp_git_repo, tmp_path):
    log_file = tmp_path / "analysis.log"
    analyzer = CommitAnalyzer(temp_git_repo)
    analyzer.add_observer(FileLogObserver(log_file))

    analyzer.analyze()

    lines = Path(log_file).read_text().splitlines()
    assert len(lines) == 4
    assert "Failed: 3 commits analyzed, 2 with findings" in lines[-1]


def test_package_root_exports(temp_git_repo):
    import gitcommitcheck

    commits = gitcommitcheck.fetch_commits(temp_git_repo, limit=1)
    assert [c.subject for c in commits] == ["WIP: quick thing"]

    report = gitcommitcheck.CommitAnalyzer(temp_git_repo).analyze()
    assert report.analyzed_count == 3
