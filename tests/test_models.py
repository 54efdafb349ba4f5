"""Tests for convy data models."""

import dataclasses

import pytest

from convy.errors import MissingDescriptionError
from convy.models import BREAKING_CHANGE_TOKEN, CommitMessage, Footer, ValidationResult


@pytest.fixture
def commit():
    """Commit with every field populated."""
    return CommitMessage(
        commit_type="feat",
        scope="auth",
        description="add login",
        body="Implemented OAuth2 flow.",
        footers=(
            Footer("BREAKING-CHANGE", "sessions are invalidated"),
            Footer("Co-authored-by", "Alice <alice@example.com>"),
        ),
        breaking=True,
    )


class TestFooter:
    """Tests for Footer dataclass."""

    def test_breaking_change_flag(self):
        assert Footer(BREAKING_CHANGE_TOKEN, "x").is_breaking_change is True
        assert Footer("Refs", "1").is_breaking_change is False

    def test_matches_ignores_case(self):
        assert Footer("Signed-off-by", "x").matches("signed-OFF-by")

    def test_format(self):
        assert Footer("Refs", "12").format() == "Refs: 12"
        assert Footer("BREAKING-CHANGE", "").format() == "BREAKING-CHANGE:"

    def test_frozen(self):
        footer = Footer("Refs", "1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            footer.value = "2"


class TestCommitMessage:
    """Tests for CommitMessage dataclass."""

    def test_defaults(self):
        commit = CommitMessage(commit_type="fix", description="typo")

        assert commit.scope is None
        assert commit.body is None
        assert commit.footers == ()
        assert commit.breaking is False

    def test_header(self, commit):
        assert commit.header == "feat(auth)!: add login"

    def test_footer_lookup(self, commit):
        assert commit.footer("co-authored-by").value == "Alice <alice@example.com>"
        assert commit.footer("Refs") is None

    def test_breaking_change_value(self, commit):
        assert commit.breaking_change == "sessions are invalidated"

    def test_format(self, commit):
        assert commit.format() == (
            "feat(auth)!: add login\n"
            "\n"
            "Implemented OAuth2 flow.\n"
            "\n"
            "BREAKING-CHANGE: sessions are invalidated\n"
            "Co-authored-by: Alice <alice@example.com>"
        )

    def test_format_header_only(self):
        assert CommitMessage(commit_type="ci", description="tidy").format() == "ci: tidy"

    def test_to_dict(self, commit):
        data = commit.to_dict()

        assert data["type"] == "feat"
        assert data["scope"] == "auth"
        assert data["breaking"] is True
        assert data["footers"][1] == {
            "token": "Co-authored-by",
            "value": "Alice <alice@example.com>",
        }


class TestValidationResult:
    """Tests for ValidationResult dataclass."""

    def test_valid(self, commit):
        result = ValidationResult(commit=commit)

        assert result.is_valid is True
        assert result.error_kind is None

    def test_invalid(self):
        error = MissingDescriptionError()
        result = ValidationResult(error=error, violations=(error,))

        assert result.is_valid is False
        assert result.error_kind == "MissingDescription"
        assert str(result.error) == "Description is missing"
