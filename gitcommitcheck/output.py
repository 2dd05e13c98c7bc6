"""Output formatting for commit analysis results."""
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape

from .models import Severity, ValidationReport
from .validation import suggest

SEVERITY_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "blue",
    Severity.IGNORE: "dim",
}


def print_results(
    console: Console,
    report: ValidationReport,
    path: Optional[Path] = None,
    show_suggestions: bool = True,
) -> None:
    """Print a validation report as human-readable text."""
    if report.skipped:
        console.print(
            f"Branch '{escape(report.branch or '')}' does not match the configured "
            "branch patterns, skipping validation.",
            soft_wrap=True,
        )
        return

    if report.total_count == 0:
        console.print("No commits found in repository.")
        return

    if not report.results:
        console.print("[green]Commit messages are adequately executed.[/green]")
        return

    location = escape(str(path)) if path is not None else "."
    console.print(
        f"Analyzed {report.analyzed_count} of {report.total_count} total commits "
        f"on path {location}\n",
        soft_wrap=True,
    )
    console.print(
        f"Found {len(report.results)} commits with issues "
        f"({report.error_count} errors, {report.warning_count} warnings) "
        f"(threshold: {report.threshold} chars):\n"
    )

    for result in report.results:
        subject = result.commit.subject
        console.print(f'  {result.commit.hash}: "{escape(subject)}"', soft_wrap=True)
        for finding in result.findings:
            style = SEVERITY_STYLES[finding.severity]
            console.print(
                f"    [{style}]{escape(finding.severity.label)}[/{style}] "
                f"{escape(finding.kind.description)}",
                soft_wrap=True,
            )
            if show_suggestions:
                hint = suggest(finding.kind, subject)
                console.print(f"      [dim]→ {escape(hint)}[/dim]", soft_wrap=True)


def report_to_dict(report: ValidationReport, show_suggestions: bool = True) -> Dict[str, Any]:
    """Convert a report to plain data for JSON output."""
    results = []
    for result in report.results:
        findings = []
        for finding in result.findings:
            entry = {"kind": finding.kind.value, "severity": finding.severity.value}
            if show_suggestions:
                entry["suggestion"] = suggest(finding.kind, result.commit.subject)
            findings.append(entry)
        results.append(
            {
                "hash": result.commit.hash,
                "author_name": result.commit.author_name,
                "author_email": result.commit.author_email,
                "subject": result.commit.subject,
                "findings": findings,
            }
        )

    return {
        "branch": report.branch,
        "skipped": report.skipped,
        "analyzed": report.analyzed_count,
        "total": report.total_count,
        "threshold": report.threshold,
        "has_errors": report.has_errors,
        "has_warnings": report.has_warnings,
        "error_count": report.error_count,
        "warning_count": report.warning_count,
        "results": results,
    }


def print_json(console: Console, report: ValidationReport, show_suggestions: bool = True) -> None:
    console.print_json(data=report_to_dict(report, show_suggestions))
