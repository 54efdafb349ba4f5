"""Shared pytest fixtures for convy tests."""

import pytest

from convy.config import Config
from convy.parser import CommitMessageParser


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from CONVY_* variables and any .convy.json in the cwd."""
    for name in (
        "CONVY_ADDITIONAL_TYPES",
        "CONVY_REQUIRE_BREAKING_CHANGE_FOOTER",
        "CONVY_STRICT_FOOTERS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def default_config():
    """Config with default policy."""
    return Config()


@pytest.fixture
def lenient_breaking_config():
    """Config that does not require a BREAKING-CHANGE footer for '!'."""
    return Config(require_breaking_change_footer=False)


@pytest.fixture
def parser(default_config):
    """Create a parser with the default config."""
    return CommitMessageParser(default_config)


@pytest.fixture
def footer_message():
    """Message with a body and two trailers."""
    return (
        "feat: add new API endpoint\n"
        "\n"
        "This introduces a new endpoint.\n"
        "\n"
        "Signed-off-by: Jane Doe <jane@example.com>\n"
        "Co-authored-by: John Smith <john@example.com>"
    )


@pytest.fixture
def breaking_message():
    """Breaking change declared in both header and footer."""
    return (
        "refactor(api)!: major API overhaul\n"
        "\n"
        "Details.\n"
        "\n"
        "BREAKING CHANGE: The entire API surface has changed."
    )
