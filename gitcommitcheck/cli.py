#!/usr/bin/env python3
import os
from pathlib import Path
from typing import Dict, List, Optional

import click
import pyperclip
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import (
    DEFAULT_CONFIG_FILENAME,
    Config,
    ConfigLayer,
    find_config_file,
)
from .core import CommitAnalyzer
from .exceptions import GitCommitCheckError
from .models import ValidationKind
from .observers import ConsoleLogObserver, FileLogObserver
from .output import print_json, print_results

console = Console()


def split_names(value: Optional[str]) -> List[str]:
    """Split a comma-separated list of rule names, dropping blanks."""
    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


def build_override_layer(
    threshold: Optional[int] = None,
    strict: bool = False,
    disable: Optional[str] = None,
    error: Optional[str] = None,
    warn: Optional[str] = None,
    ignore: Optional[str] = None,
) -> ConfigLayer:
    """Build the command line configuration layer.

    Severity flags are applied in the order error, warn, ignore, so a rule
    named in several of them ends up with the last one.
    """
    severity: Dict[str, str] = {}
    for level, names in (("error", error), ("warning", warn), ("ignore", ignore)):
        for name in split_names(names):
            severity[name] = level

    return ConfigLayer(
        threshold=threshold,
        strict=True if strict else None,
        disable=split_names(disable),
        severity=severity,
    )


def print_config(config: Config, config_path: Optional[Path]) -> None:
    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path is not None:
        console.print(
            f"[dim]Config file: {escape(str(config_path).replace(os.sep, '/'))}[/dim]",
            soft_wrap=True,
        )
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<20} {'Value':<20}")
    console.print("-" * 40)

    def print_setting(name: str, value: object):
        console.print(f"{name:<20} {escape(str(value)):<20}")

    print_setting("threshold", config.threshold)
    print_setting("strict", config.strict)
    print_setting("branches", ", ".join(config.branches) or "all")
    for kind in ValidationKind:
        state = config.get_severity(kind).value if config.is_enabled(kind) else "disabled"
        print_setting(kind.value, state)


@click.command()
@click.version_option(__version__, prog_name="git-commit-check")
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-l", "--limit", type=click.IntRange(min=0), help="Maximum number of commits to analyze"
)
@click.option(
    "-t",
    "--threshold",
    type=click.IntRange(min=0),
    help="Subjects at or below this many characters are short (default: 30)",
)
@click.option("-q", "--quiet", is_flag=True, help="Suppress output unless issues are found")
@click.option(
    "--error",
    metavar="RULES",
    help="Rules to treat as errors (comma-separated). Available: ShortCommit, "
    "MissingReference, InvalidFormat, VagueLanguage, WipCommit, NonImperative. "
    "Aliases: short, ref, format, vague, wip, imperative",
)
@click.option("--warn", metavar="RULES", help="Rules to treat as warnings (comma-separated)")
@click.option("--ignore", metavar="RULES", help="Rules to evaluate but never report")
@click.option(
    "--disable",
    metavar="RULES",
    help="Rules to skip entirely (comma-separated). Unlike --ignore, the check never runs",
)
@click.option("--strict", is_flag=True, help="Treat warnings as errors (exit non-zero)")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help=f"Config file to use instead of searching for {DEFAULT_CONFIG_FILENAME} "
    "or pyproject.toml",
)
@click.option("--no-config", is_flag=True, help="Ignore configuration files")
@click.option(
    "--suggest/--no-suggest", default=True, help="Show a fix suggestion for each finding"
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Append per-commit results to this file",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each commit as it is validated")
@click.option("--config-list", is_flag=True, help="Display current configuration settings")
@click.option(
    "--config-dir",
    is_flag=True,
    help="Display the config file location and copy it to clipboard",
)
@click.pass_context
def main(
    ctx: click.Context,
    path: Path,
    limit: Optional[int],
    threshold: Optional[int],
    quiet: bool,
    error: Optional[str],
    warn: Optional[str],
    ignore: Optional[str],
    disable: Optional[str],
    strict: bool,
    config_file: Optional[Path],
    no_config: bool,
    suggest: bool,
    output_format: str,
    log_file: Optional[Path],
    verbose: bool,
    config_list: bool,
    config_dir: bool,
):
    """
    Check commit subjects against quality rules before merging.

    Every commit reachable from HEAD is checked for short messages, missing
    issue references, non-conventional format, vague wording, work-in-progress
    markers and non-imperative mood. Exits non-zero when an error-level
    finding is reported (or any warning with --strict).

    Configuration can be set in .gitcommitcheck.toml or in the
    [tool.gitcommitcheck] table of pyproject.toml. Command line options
    override configuration file settings.
    """
    try:
        repo_path = path.absolute()

        if config_dir:
            config_path = config_file or find_config_file(repo_path)

            # Create default config file if none exists
            if config_path is None:
                config_path = Config().save(repo_path)
                console.print("[yellow]Created new config file with default values[/yellow]")

            config_path_str = str(config_path)
            pyperclip.copy(config_path_str)
            console.print(
                f"[green]Config file location:[/green] {escape(config_path_str)}",
                soft_wrap=True,
            )
            console.print("[green]Path copied to clipboard![/green]")
            return

        overrides = build_override_layer(threshold, strict, disable, error, warn, ignore)
        if no_config:
            config_path = None
            config = Config().apply_layer(overrides)
        else:
            config_path = config_file or find_config_file(repo_path)
            config = Config.load(repo_path, overrides=overrides, config_file=config_path)

        if config_list:
            print_config(config, config_path)
            return

        analyzer = CommitAnalyzer(repo_path, config)
        if verbose:
            analyzer.add_observer(ConsoleLogObserver(Console(stderr=True)))
        if log_file is not None:
            analyzer.add_observer(FileLogObserver(log_file))

        report = analyzer.analyze(limit)

        if output_format == "json":
            print_json(console, report, show_suggestions=suggest)
        elif not quiet or report.results:
            print_results(console, report, path=path, show_suggestions=suggest)

        if report.should_fail(config.strict):
            ctx.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
    except GitCommitCheckError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        raise click.Abort()


if __name__ == "__main__":
    main()
