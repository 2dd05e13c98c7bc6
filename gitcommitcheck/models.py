"""Shared models for git-commit-check."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .exceptions import UnknownRuleError, UnknownSeverityError


class Severity(str, Enum):
    """Reporting weight of a finding.

    Levels are ordered ``ERROR > WARNING > INFO > IGNORE``; ``IGNORE`` means
    the finding is evaluated but never reported.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    IGNORE = "ignore"

    @classmethod
    def parse(cls, text: str) -> "Severity":
        """Parse a severity name (case-insensitive, accepts ``warn`` and ``off``)."""
        key = text.strip().lower()
        try:
            return _SEVERITY_ALIASES[key]
        except KeyError:
            raise UnknownSeverityError(text) from None

    @property
    def rank(self) -> int:
        return _SEVERITY_RANKS[self]

    @property
    def label(self) -> str:
        """Short bracketed prefix used when rendering findings."""
        return _SEVERITY_LABELS[self]

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank


_SEVERITY_RANKS: Dict[Severity, int] = {
    Severity.ERROR: 3,
    Severity.WARNING: 2,
    Severity.INFO: 1,
    Severity.IGNORE: 0,
}

_SEVERITY_LABELS: Dict[Severity, str] = {
    Severity.ERROR: "[error]",
    Severity.WARNING: "[warn]",
    Severity.INFO: "[info]",
    Severity.IGNORE: "",
}

_SEVERITY_ALIASES: Dict[str, Severity] = {
    "error": Severity.ERROR,
    "warning": Severity.WARNING,
    "warn": Severity.WARNING,
    "info": Severity.INFO,
    "ignore": Severity.IGNORE,
    "off": Severity.IGNORE,
}


class ValidationKind(str, Enum):
    """The closed set of rules a commit subject is checked against.

    The value is the canonical rule name used in configuration files and on
    the command line.
    """

    SHORT_COMMIT = "ShortCommit"
    MISSING_REFERENCE = "MissingReference"
    INVALID_FORMAT = "InvalidFormat"
    VAGUE_LANGUAGE = "VagueLanguage"
    WIP_COMMIT = "WipCommit"
    NON_IMPERATIVE = "NonImperative"

    @classmethod
    def parse(cls, name: str) -> "ValidationKind":
        """Resolve a canonical rule name or one of its aliases.

        Matching ignores case, dashes and underscores, so ``ShortCommit``,
        ``short-commit`` and ``short`` all resolve to ``SHORT_COMMIT``.
        """
        key = name.strip().lower().replace("-", "").replace("_", "")
        for kind in cls:
            if key == kind.value.lower() or key in _KIND_ALIASES[kind]:
                return kind
        raise UnknownRuleError(name)

    @property
    def aliases(self) -> Tuple[str, ...]:
        return _KIND_ALIASES[self]

    @property
    def alias(self) -> str:
        """Preferred short name, as written in configuration files."""
        return _KIND_ALIASES[self][0]

    @property
    def description(self) -> str:
        return _KIND_DESCRIPTIONS[self]

    @property
    def default_severity(self) -> Severity:
        return _DEFAULT_SEVERITIES[self]

    def __str__(self) -> str:
        return self.description


_KIND_ALIASES: Dict[ValidationKind, Tuple[str, ...]] = {
    ValidationKind.SHORT_COMMIT: ("short",),
    ValidationKind.MISSING_REFERENCE: ("reference", "ref"),
    ValidationKind.INVALID_FORMAT: ("format",),
    ValidationKind.VAGUE_LANGUAGE: ("vague",),
    ValidationKind.WIP_COMMIT: ("wip",),
    ValidationKind.NON_IMPERATIVE: ("imperative",),
}

_KIND_DESCRIPTIONS: Dict[ValidationKind, str] = {
    ValidationKind.SHORT_COMMIT: "Short commit message",
    ValidationKind.MISSING_REFERENCE: "Missing issue reference (e.g., #123)",
    ValidationKind.INVALID_FORMAT: "Invalid format (expected: type: description)",
    ValidationKind.VAGUE_LANGUAGE: "Vague language (e.g., 'fix bug', 'update code')",
    ValidationKind.WIP_COMMIT: "Work-in-progress commit (e.g., 'WIP', 'fixup!')",
    ValidationKind.NON_IMPERATIVE: "Non-imperative mood (use 'Add' not 'Added')",
}

_DEFAULT_SEVERITIES: Dict[ValidationKind, Severity] = {
    ValidationKind.WIP_COMMIT: Severity.ERROR,
    ValidationKind.SHORT_COMMIT: Severity.WARNING,
    ValidationKind.VAGUE_LANGUAGE: Severity.WARNING,
    ValidationKind.NON_IMPERATIVE: Severity.WARNING,
    ValidationKind.MISSING_REFERENCE: Severity.INFO,
    ValidationKind.INVALID_FORMAT: Severity.INFO,
}


@dataclass(frozen=True)
class Commit:
    hash: str
    author_name: str
    author_email: str
    subject: str

    def is_short(self, threshold: int) -> bool:
        """Check if the subject is at or below ``threshold`` characters."""
        return len(self.subject) <= threshold


@dataclass(frozen=True)
class Finding:
    kind: ValidationKind
    severity: Severity


@dataclass
class ValidationResult:
    """A commit paired with the findings raised against it."""

    commit: Commit
    findings: List[Finding] = field(default_factory=list)

    @property
    def kinds(self) -> List[ValidationKind]:
        return [finding.kind for finding in self.findings]

    @property
    def has_errors(self) -> bool:
        return any(f.severity is Severity.ERROR for f in self.findings)

    @property
    def has_warnings(self) -> bool:
        return any(f.severity is Severity.WARNING for f in self.findings)

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.findings if f.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for f in self.findings if f.severity is Severity.WARNING)


@dataclass
class ValidationReport:
    """Outcome of analyzing a repository's history.

    Attributes:
        results: Commits with at least one finding, newest first
        analyzed_count: Number of commits that were validated
        total_count: Number of commits reachable from HEAD
        threshold: Short-commit threshold the run used
        branch: Current branch name, or None when HEAD is detached
        skipped: True when the branch filter excluded this run
    """

    results: List[ValidationResult] = field(default_factory=list)
    analyzed_count: int = 0
    total_count: int = 0
    threshold: int = 30
    branch: Optional[str] = None
    skipped: bool = False

    @property
    def has_errors(self) -> bool:
        return any(result.has_errors for result in self.results)

    @property
    def has_warnings(self) -> bool:
        return any(result.has_warnings for result in self.results)

    @property
    def error_count(self) -> int:
        """Number of commits with at least one error."""
        return sum(1 for result in self.results if result.has_errors)

    @property
    def warning_count(self) -> int:
        """Number of commits with at least one warning."""
        return sum(1 for result in self.results if result.has_warnings)

    def should_fail(self, strict: bool = False) -> bool:
        return self.has_errors or (strict and self.has_warnings)
