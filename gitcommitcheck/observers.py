"""Observer pattern for validation runs."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.markup import escape

from .models import ValidationReport, ValidationResult


class ValidationObserver(ABC):
    """Abstract base class for validation observers."""

    @abstractmethod
    def on_commit_validated(self, result: ValidationResult) -> None:
        """Called after each commit is validated, including clean ones."""
        pass

    @abstractmethod
    def on_run_completed(self, report: ValidationReport) -> None:
        """Called once all commits of a run have been validated."""
        pass


class ConsoleLogObserver(ValidationObserver):
    """Observer that logs validation progress to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def on_commit_validated(self, result: ValidationResult) -> None:
        short_hash = result.commit.hash[:7]
        if result.findings:
            kinds = ", ".join(kind.value for kind in result.kinds)
            self.console.print(f"[yellow]Checked {short_hash}: {kinds}[/yellow]")
        else:
            self.console.print(f"[dim]Checked {short_hash}: ok[/dim]")

    def on_run_completed(self, report: ValidationReport) -> None:
        if report.skipped:
            self.console.print(
                f"[dim]Skipped branch {escape(report.branch or '')}[/dim]"
            )
            return
        self.console.print(
            f"[dim]Validated {report.analyzed_count} commits, "
            f"{len(report.results)} with findings[/dim]"
        )


class FileLogObserver(ValidationObserver):
    """Observer that logs validation results to a file."""

    def __init__(self, log_file: Union[str, Path]):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_commit_validated(self, result: ValidationResult) -> None:
        if not result.findings:
            self._log(f"{result.commit.hash} ok")
            return
        findings = ", ".join(
            f"{finding.kind.value}={finding.severity.value}"
            for finding in result.findings
        )
        self._log(f"{result.commit.hash} {findings}")

    def on_run_completed(self, report: ValidationReport) -> None:
        if report.skipped:
            self._log(f"Skipped branch {report.branch}")
            return
        status = "Failed" if report.has_errors else "Passed"
        self._log(
            f"{status}: {report.analyzed_count} commits analyzed, "
            f"{len(report.results)} with findings"
        )
