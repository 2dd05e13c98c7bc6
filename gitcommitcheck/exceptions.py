"""Exceptions raised by git-commit-check."""
from pathlib import Path
from typing import Union


class GitCommitCheckError(Exception):
    """Base class for all git-commit-check errors."""


class ConfigError(GitCommitCheckError, ValueError):
    """Raised when a configuration layer cannot be merged."""


class UnknownRuleError(ConfigError):
    """A rule name did not resolve to any validation kind."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"invalid validation name: '{token}' "
            "(valid: short, wip, reference, format, vague, imperative)"
        )


class UnknownSeverityError(ConfigError):
    """A severity string did not resolve to any severity level."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"invalid severity: '{token}' (valid: error, warning, info, ignore)"
        )


class ConfigFileError(ConfigError):
    """A configuration file could not be read or parsed."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"failed to load config file '{self.path}': {reason}")


class RepositoryError(GitCommitCheckError):
    """Raised when commits cannot be read from a repository."""


class PathNotFoundError(RepositoryError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Path '{self.path}' does not exist")


class NotARepositoryError(RepositoryError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Path '{self.path}' is not a git repository")


class GitLogError(RepositoryError):
    """A git command failed while reading history."""

    def __init__(self, message: str):
        super().__init__(f"Git command failed: {message}")
