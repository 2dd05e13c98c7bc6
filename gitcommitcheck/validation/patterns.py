"""Pattern rules evaluated against a commit subject.

Every rule is a pure function of the subject line. Patterns are compiled once
when the module is imported.
"""
import re
from typing import Dict, Optional, Tuple

CONVENTIONAL_TYPES: Tuple[str, ...] = (
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "build",
    "ci",
    "chore",
    "revert",
)

# (imperative, past tense, present continuous)
VERB_FORMS: Tuple[Tuple[str, str, str], ...] = (
    ("add", "added", "adding"),
    ("remove", "removed", "removing"),
    ("fix", "fixed", "fixing"),
    ("update", "updated", "updating"),
    ("change", "changed", "changing"),
    ("implement", "implemented", "implementing"),
    ("create", "created", "creating"),
    ("delete", "deleted", "deleting"),
    ("modify", "modified", "modifying"),
    ("refactor", "refactored", "refactoring"),
    ("improve", "improved", "improving"),
    ("resolve", "resolved", "resolving"),
    ("merge", "merged", "merging"),
    ("move", "moved", "moving"),
    ("rename", "renamed", "renaming"),
    ("replace", "replaced", "replacing"),
    ("clean", "cleaned", "cleaning"),
    ("enable", "enabled", "enabling"),
    ("disable", "disabled", "disabling"),
    ("convert", "converted", "converting"),
    ("introduce", "introduced", "introducing"),
    ("integrate", "integrated", "integrating"),
    ("adjust", "adjusted", "adjusting"),
    ("correct", "corrected", "correcting"),
    ("enhance", "enhanced", "enhancing"),
    ("extend", "extended", "extending"),
    ("optimize", "optimized", "optimizing"),
    ("simplify", "simplified", "simplifying"),
    ("upgrade", "upgraded", "upgrading"),
    ("migrate", "migrated", "migrating"),
)

IMPERATIVE_FORMS: Dict[str, str] = {
    form: imperative
    for imperative, past, continuous in VERB_FORMS
    for form in (past, continuous)
}

_TYPES = "|".join(CONVENTIONAL_TYPES)

REFERENCE_PATTERN = re.compile(r"#\d+|(?i:gh)-\d+|[A-Z]{2,}-\d+")

CONVENTIONAL_PATTERN = re.compile(
    rf"^(?P<type>{_TYPES})"
    r"(?P<scope>\(.+\))?"
    r"(?P<breaking>!)?"
    r": (?P<description>\S.*)$"
)

VAGUE_PATTERN = re.compile(
    r"\b(?:fix(?:es|ed|ing)?"
    r"|updat(?:e|es|ed|ing)"
    r"|chang(?:e|es|ed|ing)"
    r"|modif(?:y|ies|ied|ying)"
    r"|tweak(?:s|ed|ing)?"
    r"|adjust(?:s|ed|ing)?)"
    r"\s+(?:it|this|that|stuff|(?:thing|code|bug|issue|error|problem)s?)\b",
    re.IGNORECASE,
)

WIP_PATTERN = re.compile(
    r"(?P<autosquash>^(?:fixup|squash)!)"
    r"|(?P<amend>^amend!)"
    r"|(?P<no_merge>\bdo\s*not\s*merge\b|\bdon'?t\s*merge\b)"
    r"|(?P<marker>^wip\b|^\[wip\]|\bwork[\s_-]?in[\s_-]?progress\b|\bwip\s*$)",
    re.IGNORECASE,
)

NON_IMPERATIVE_PATTERN = re.compile(
    rf"^(?:(?:{_TYPES})(?:\([^)]+\))?!?:\s*)?"
    r"(?P<verb>" + "|".join(sorted(IMPERATIVE_FORMS, key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)


def has_reference(subject: str) -> bool:
    """Check if the subject mentions an issue or ticket (#123, GH-45, PROJ-7)."""
    return REFERENCE_PATTERN.search(subject) is not None


def has_conventional_format(subject: str) -> bool:
    """Check if the subject follows ``type(scope)!: description``."""
    return CONVENTIONAL_PATTERN.match(subject) is not None


def find_vague_language(subject: str) -> Optional[str]:
    """Return the first generic phrase such as "fix bug", if any."""
    match = VAGUE_PATTERN.search(subject)
    return match.group(0) if match else None


def has_vague_language(subject: str) -> bool:
    return find_vague_language(subject) is not None


def wip_form(subject: str) -> Optional[str]:
    """Return which work-in-progress form the subject uses.

    One of ``"autosquash"`` (fixup!/squash!), ``"amend"``, ``"no_merge"`` or
    ``"marker"`` (WIP, [WIP], work in progress), or None for a final commit.
    """
    match = WIP_PATTERN.search(subject)
    return match.lastgroup if match else None


def is_wip_commit(subject: str) -> bool:
    return wip_form(subject) is not None


def find_non_imperative(subject: str) -> Optional[str]:
    """Return the leading past-tense or -ing verb, ignoring a conventional prefix."""
    match = NON_IMPERATIVE_PATTERN.match(subject)
    return match.group("verb") if match else None


def is_non_imperative(subject: str) -> bool:
    return find_non_imperative(subject) is not None
