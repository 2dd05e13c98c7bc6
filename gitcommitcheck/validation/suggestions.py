"""Remediation hints for failed rules."""
from typing import Callable, Dict, Tuple

from ..models import ValidationKind
from . import patterns

# Ordered (commit type, starts-with keywords, contains keywords); first match wins.
TYPE_HEURISTICS: Tuple[Tuple[str, Tuple[str, ...], Tuple[str, ...]], ...] = (
    ("chore", ("merge",), ()),
    ("fix", (), ("fix", "resolve", "repair", "patch", "correct")),
    ("feat", ("add", "implement", "create", "introduce"), ("new feature",)),
    (
        "refactor",
        (),
        ("refactor", "restructure", "reorganize", "simplify", "clean up"),
    ),
    (
        "chore",
        ("delete", "remove", "init"),
        ("bump", "upgrade", "dependency", "dependencies", "version", "config"),
    ),
    ("docs", (), ("readme", "doc", "comment", "typo")),
    ("test", (), ("test", "spec", "coverage")),
)

DEFAULT_COMMIT_TYPE = "feat"


def infer_commit_type(subject: str) -> str:
    """Guess a conventional commit type from keywords in the subject."""
    text = subject.lower()
    for commit_type, prefixes, keywords in TYPE_HEURISTICS:
        if text.startswith(prefixes) or any(word in text for word in keywords):
            return commit_type
    return DEFAULT_COMMIT_TYPE


def _suggest_short(subject: str) -> str:
    return "Add more context: describe what changed and why"


def _suggest_reference(subject: str) -> str:
    return "Reference the related issue or ticket (e.g., #123, GH-45, PROJ-789)"


def _suggest_format(subject: str) -> str:
    commit_type = infer_commit_type(subject)
    return f"Use conventional format: '{commit_type}: <description>'"


def _suggest_vague(subject: str) -> str:
    phrase = patterns.find_vague_language(subject)
    if phrase:
        return f"'{phrase}' lacks specifics: say what was changed and where"
    return "Describe the change specifically instead of using generic wording"


def _suggest_wip(subject: str) -> str:
    form = patterns.wip_form(subject)
    if form == "autosquash":
        return "Squash into its target before merging: git rebase -i --autosquash <base>"
    if form == "amend":
        return "Fold the amendment into its target: git rebase -i <base>"
    if form == "no_merge":
        return "Remove the do-not-merge marker: git commit --amend"
    return "Finalize this work-in-progress commit before merging"


def _suggest_imperative(subject: str) -> str:
    verb = patterns.find_non_imperative(subject)
    imperative = patterns.IMPERATIVE_FORMS.get(verb.lower()) if verb else None
    if not imperative:
        return "Use imperative mood (e.g., 'Add' not 'Added')"
    if verb[0].isupper():
        imperative = imperative[0].upper() + imperative[1:]
    return f"Use imperative mood: '{verb}' → '{imperative}'"


SUGGESTERS: Dict[ValidationKind, Callable[[str], str]] = {
    ValidationKind.SHORT_COMMIT: _suggest_short,
    ValidationKind.MISSING_REFERENCE: _suggest_reference,
    ValidationKind.INVALID_FORMAT: _suggest_format,
    ValidationKind.VAGUE_LANGUAGE: _suggest_vague,
    ValidationKind.WIP_COMMIT: _suggest_wip,
    ValidationKind.NON_IMPERATIVE: _suggest_imperative,
}


def suggest(kind: ValidationKind, subject: str) -> str:
    """Return a one-line hint for fixing ``kind`` on ``subject``."""
    return SUGGESTERS[kind](subject)
