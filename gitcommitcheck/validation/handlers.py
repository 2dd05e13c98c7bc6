"""Commit subject validation using Chain of Responsibility pattern.

Each handler owns one rule. Handlers run in a fixed order and share a
``ValidationContext`` so that earlier rules can suppress later ones: a WIP
commit skips the short and vague checks, and a short commit skips the mood
check.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import Config
from ..models import Finding, Severity, ValidationKind
from . import patterns


@dataclass
class ValidationContext:
    """Per-commit state passed along the handler chain."""

    subject: str
    config: Config
    findings: List[Finding] = field(default_factory=list)
    is_wip: bool = False
    is_short: bool = False

    def report(self, kind: ValidationKind) -> None:
        """Record a finding unless the rule's severity is ignore."""
        severity = self.config.get_severity(kind)
        if severity is not Severity.IGNORE:
            self.findings.append(Finding(kind=kind, severity=severity))


class ValidationHandler(ABC):
    """Abstract base class for validation handlers."""

    kind: ValidationKind

    def __init__(self, next_handler: Optional["ValidationHandler"] = None):
        self.next_handler = next_handler

    def handle(self, context: ValidationContext) -> ValidationContext:
        """Evaluate this rule if it applies, then pass to the next handler."""
        if self.applies(context):
            self.evaluate(context)
        if self.next_handler:
            return self.next_handler.handle(context)
        return context

    def applies(self, context: ValidationContext) -> bool:
        return context.config.is_enabled(self.kind)

    @abstractmethod
    def evaluate(self, context: ValidationContext) -> None:
        """Check the subject and report a finding on failure."""
        pass


class WipCommitHandler(ValidationHandler):
    """Flags work-in-progress commits (WIP, fixup!, do not merge)."""

    kind = ValidationKind.WIP_COMMIT

    def evaluate(self, context: ValidationContext) -> None:
        if patterns.is_wip_commit(context.subject):
            context.is_wip = True
            context.report(self.kind)


class ShortCommitHandler(ValidationHandler):
    """Flags subjects at or below the configured threshold.

    The length check runs even when the rule is disabled because the
    mood check depends on its outcome.
    """

    kind = ValidationKind.SHORT_COMMIT

    def applies(self, context: ValidationContext) -> bool:
        return not context.is_wip

    def evaluate(self, context: ValidationContext) -> None:
        context.is_short = len(context.subject) <= context.config.threshold
        if context.is_short and context.config.is_enabled(self.kind):
            context.report(self.kind)


class VagueLanguageHandler(ValidationHandler):
    kind = ValidationKind.VAGUE_LANGUAGE

    def applies(self, context: ValidationContext) -> bool:
        return super().applies(context) and not context.is_wip

    def evaluate(self, context: ValidationContext) -> None:
        if patterns.has_vague_language(context.subject):
            context.report(self.kind)


class MissingReferenceHandler(ValidationHandler):
    kind = ValidationKind.MISSING_REFERENCE

    def evaluate(self, context: ValidationContext) -> None:
        if not patterns.has_reference(context.subject):
            context.report(self.kind)


class InvalidFormatHandler(ValidationHandler):
    kind = ValidationKind.INVALID_FORMAT

    def evaluate(self, context: ValidationContext) -> None:
        if not patterns.has_conventional_format(context.subject):
            context.report(self.kind)


class NonImperativeHandler(ValidationHandler):
    """Flags subjects opening with a past-tense or -ing verb.

    Skipped for short subjects, which carry too little text to judge mood.
    """

    kind = ValidationKind.NON_IMPERATIVE

    def applies(self, context: ValidationContext) -> bool:
        return super().applies(context) and not context.is_short

    def evaluate(self, context: ValidationContext) -> None:
        if patterns.is_non_imperative(context.subject):
            context.report(self.kind)


def create_validation_chain() -> ValidationHandler:
    """Create the default validation chain."""
    non_imperative = NonImperativeHandler()
    invalid_format = InvalidFormatHandler(non_imperative)
    missing_reference = MissingReferenceHandler(invalid_format)
    vague_language = VagueLanguageHandler(missing_reference)
    short_commit = ShortCommitHandler(vague_language)
    wip_commit = WipCommitHandler(short_commit)

    return wip_commit
