"""Tests for remediation hints."""
import pytest

from gitcommitcheck.models import ValidationKind
from gitcommitcheck.validation.suggestions import infer_commit_type, suggest


@pytest.mark.parametrize("subject, expected", [
    ("Merge branch 'main' into feature", "chore"),
    ("merge pull request #12", "chore"),
    ("fix login redirect", "fix"),
    ("resolve crash on startup", "fix"),
    ("Patch the parser", "fix"),
    ("Add user profile page", "feat"),
    ("implement caching layer", "feat"),
    ("ship a new feature for exports", "feat"),
    ("Refactor the storage module", "refactor"),
    ("clean up old handlers", "refactor"),
    ("Remove legacy endpoints", "chore"),
    ("bump requests to 2.32", "chore"),
    ("upgrade dependencies", "chore"),
    ("Update README", "docs"),
    ("explain flags in docstring", "docs"),
    ("raise coverage for the parser", "test"),
    ("something else entirely", "feat"),
    ("", "feat"),
])
def test_infer_commit_type(subject, expected):
    assert infer_commit_type(subject) == expected


def test_heuristics_first_match_wins():
    # "fix" is checked before the docs keywords
    assert infer_commit_type("fix typo in readme") == "fix"
    # "add" prefix wins over the test keywords
    assert infer_commit_type("add test helpers") == "feat"


def test_short_hint_ignores_subject():
    assert suggest(ValidationKind.SHORT_COMMIT, "x") == suggest(ValidationKind.SHORT_COMMIT, "fix bug")
    assert "context" in suggest(ValidationKind.SHORT_COMMIT, "x")


def test_reference_hint():
    assert "#123" in suggest(ValidationKind.MISSING_REFERENCE, "Add login page")


def test_format_hint_uses_inferred_type():
    assert suggest(ValidationKind.INVALID_FORMAT, "Fix login redirect") == (
        "Use conventional format: 'fix: <description>'"
    )
    assert "'docs: <description>'" in suggest(ValidationKind.INVALID_FORMAT, "Update README")


def test_vague_hint_quotes_phrase():
    hint = suggest(ValidationKind.VAGUE_LANGUAGE, "Fixed bug in parser")
    assert hint.startswith("'Fixed bug'")
    assert "lacks specifics" in hint


def test_vague_hint_without_phrase():
    hint = suggest(ValidationKind.VAGUE_LANGUAGE, "Add login page")
    assert "specific" in hint
    assert "'" not in hint


@pytest.mark.parametrize("subject, fragment", [
    ("fixup! feat: add login", "--autosquash"),
    ("squash! feat: add login", "--autosquash"),
    ("amend! feat: add login", "git rebase -i <base>"),
    ("feat: add login DO NOT MERGE", "git commit --amend"),
    ("WIP: login", "Finalize"),
])
def test_wip_hint_depends_on_form(subject, fragment):
    assert fragment in suggest(ValidationKind.WIP_COMMIT, subject)


def test_amend_hint_is_not_autosquash():
    assert "--autosquash" not in suggest(ValidationKind.WIP_COMMIT, "amend! feat: add login")


@pytest.mark.parametrize("subject, expected", [
    ("Added login page", "Use imperative mood: 'Added' → 'Add'"),
    ("added login page", "Use imperative mood: 'added' → 'add'"),
    ("feat: Implementing auth flow", "Use imperative mood: 'Implementing' → 'Implement'"),
    ("fix(api): simplified retries", "Use imperative mood: 'simplified' → 'simplify'"),
])
def test_imperative_hint(subject, expected):
    assert suggest(ValidationKind.NON_IMPERATIVE, subject) == expected


def test_imperative_hint_without_verb():
    assert "imperative mood" in suggest(ValidationKind.NON_IMPERATIVE, "Add login page")


def test_every_kind_has_a_hint():
    for kind in ValidationKind:
        hint = suggest(kind, "fix bug")
        assert hint
        assert "\n" not in hint
