"""Validation of parsed commit messages."""

from convy.validation.validator import CommitValidator

__all__ = ["CommitValidator"]
