"""Commit subject validation package."""

from .handlers import ValidationContext, ValidationHandler, create_validation_chain
from .suggestions import infer_commit_type, suggest
from .validator import CommitValidator, validate_commit, validate_commits

__all__ = [
    'ValidationContext',
    'ValidationHandler',
    'create_validation_chain',
    'CommitValidator',
    'validate_commit',
    'validate_commits',
    'infer_commit_type',
    'suggest',
]
