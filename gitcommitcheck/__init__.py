"""Commit subject quality gate for git repositories."""

__version__ = "0.3.0"

from .config import Config, ConfigLayer
from .core import CommitAnalyzer
from .exceptions import (
    ConfigError,
    ConfigFileError,
    GitCommitCheckError,
    UnknownRuleError,
    UnknownSeverityError,
)
from .git import fetch_commits
from .models import (
    Commit,
    Finding,
    Severity,
    ValidationKind,
    ValidationReport,
    ValidationResult,
)
from .validation import suggest, validate_commit, validate_commits

__all__ = [
    '__version__',
    'Config',
    'ConfigLayer',
    'CommitAnalyzer',
    'fetch_commits',
    'ConfigError',
    'ConfigFileError',
    'GitCommitCheckError',
    'UnknownRuleError',
    'UnknownSeverityError',
    'Commit',
    'Finding',
    'Severity',
    'ValidationKind',
    'ValidationReport',
    'ValidationResult',
    'suggest',
    'validate_commit',
    'validate_commits',
]
