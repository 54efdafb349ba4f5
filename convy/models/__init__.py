"""Data models for convy."""

from convy.models.dataclasses import (
    BREAKING_CHANGE_TOKEN,
    CommitMessage,
    Footer,
    ValidationResult,
)

__all__ = ["BREAKING_CHANGE_TOKEN", "CommitMessage", "Footer", "ValidationResult"]
