"""Commit validation."""
from typing import Iterable, List, Optional

from ..config import Config
from ..models import Commit, Finding, ValidationReport, ValidationResult
from ..observers import ValidationObserver
from .handlers import ValidationContext, create_validation_chain


class CommitValidator:
    """Validates commit subjects against the configured rules."""

    def __init__(
        self,
        config: Optional[Config] = None,
        observers: Optional[List[ValidationObserver]] = None,
    ):
        self.config = config or Config()
        self.observers: List[ValidationObserver] = list(observers or [])
        self.validation_chain = create_validation_chain()

    def add_observer(self, observer: ValidationObserver) -> None:
        self.observers.append(observer)

    def validate(self, commit: Commit) -> List[Finding]:
        """Validate a single commit, returning findings in evaluation order."""
        context = ValidationContext(subject=commit.subject, config=self.config)
        return self.validation_chain.handle(context).findings

    def validate_all(self, commits: Iterable[Commit]) -> List[ValidationResult]:
        """Validate commits, keeping only those with findings."""
        results = []
        for commit in commits:
            result = ValidationResult(commit=commit, findings=self.validate(commit))
            for observer in self.observers:
                observer.on_commit_validated(result)
            if result.findings:
                results.append(result)
        return results

    def notify_completed(self, report: ValidationReport) -> None:
        for observer in self.observers:
            observer.on_run_completed(report)


def validate_commit(commit: Commit, config: Config) -> List[Finding]:
    return CommitValidator(config).validate(commit)


def validate_commits(
    commits: Iterable[Commit], config: Config
) -> List[ValidationResult]:
    return CommitValidator(config).validate_all(commits)
