"""Core functionality for git-commit-check."""
from pathlib import Path
from typing import List, Optional

from .branch import matches_any_pattern
from .config import Config
from .git import count_commits, fetch_commits, get_current_branch, validate_repo_path
from .models import ValidationReport
from .observers import ValidationObserver
from .validation import CommitValidator


class CommitAnalyzer:
    """Analyzes the commit history of a Git repository."""

    def __init__(
        self,
        repo_path: Path,
        config: Optional[Config] = None,
        observers: Optional[List[ValidationObserver]] = None,
    ):
        """Initialize the analyzer for a repository.

        Args:
            repo_path: Path to the repository root
            config: Effective configuration (defaults when omitted)
            observers: Observers notified as commits are validated

        Raises:
            PathNotFoundError: If the path does not exist
            NotARepositoryError: If the path is not a repository root
        """
        validate_repo_path(repo_path)
        self.repo_path = Path(repo_path)
        self.config = config or Config()
        self.validator = CommitValidator(self.config, observers)

    def add_observer(self, observer: ValidationObserver) -> None:
        self.validator.add_observer(observer)

    def analyze(self, limit: Optional[int] = None) -> ValidationReport:
        """Validate up to ``limit`` commits reachable from HEAD.

        When branch patterns are configured and the current branch matches
        none of them, no commits are validated and the report is marked
        skipped. A detached HEAD is always validated.
        """
        branch = get_current_branch(self.repo_path)
        report = ValidationReport(threshold=self.config.threshold, branch=branch)

        if branch is not None and not matches_any_pattern(branch, self.config.branches):
            report.skipped = True
            self.validator.notify_completed(report)
            return report

        commits = fetch_commits(self.repo_path, limit)
        report.total_count = count_commits(self.repo_path)
        report.analyzed_count = len(commits)
        report.results = self.validator.validate_all(commits)

        self.validator.notify_completed(report)
        return report
