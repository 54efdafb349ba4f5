"""Data models for parsed commit messages."""

from dataclasses import dataclass, field
from typing import Optional

from convy.errors import CommitMessageError

BREAKING_CHANGE_TOKEN = "BREAKING-CHANGE"


@dataclass(frozen=True)
class Footer:
    """A single ``Token: value`` or ``Token #value`` trailer."""

    token: str
    value: str

    @property
    def is_breaking_change(self) -> bool:
        """Whether this is the canonical BREAKING-CHANGE footer."""
        return self.token == BREAKING_CHANGE_TOKEN

    def matches(self, token: str) -> bool:
        """Compare tokens case-insensitively."""
        return self.token.casefold() == token.casefold()

    def format(self) -> str:
        if not self.value:
            return f"{self.token}:"
        return f"{self.token}: {self.value}"


@dataclass(frozen=True)
class CommitMessage:
    """A validated conventional commit message."""

    commit_type: str
    description: str
    scope: Optional[str] = None
    body: Optional[str] = None
    footers: tuple[Footer, ...] = field(default_factory=tuple)
    breaking: bool = False

    def footer(self, token: str) -> Optional[Footer]:
        """Look up a footer by token, ignoring case."""
        for item in self.footers:
            if item.matches(token):
                return item
        return None

    @property
    def breaking_change(self) -> Optional[str]:
        """Value of the BREAKING-CHANGE footer, if any."""
        item = self.footer(BREAKING_CHANGE_TOKEN)
        return item.value if item else None

    @property
    def header(self) -> str:
        """The header line, e.g. ``feat(api)!: drop v1``."""
        prefix = self.commit_type
        if self.scope:
            prefix += f"({self.scope})"
        if self.breaking:
            prefix += "!"
        return f"{prefix}: {self.description}"

    def format(self) -> str:
        """Serialize back to canonical message text.

        Header, body and footer block are separated by one blank line.
        """
        sections = [self.header]
        if self.body:
            sections.append(self.body)
        if self.footers:
            sections.append("\n".join(item.format() for item in self.footers))
        return "\n\n".join(sections)

    def to_dict(self) -> dict:
        return {
            "type": self.commit_type,
            "scope": self.scope,
            "breaking": self.breaking,
            "description": self.description,
            "body": self.body,
            "footers": [{"token": f.token, "value": f.value} for f in self.footers],
        }


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a message: a commit or the error rejecting it."""

    commit: Optional[CommitMessage] = None
    error: Optional[CommitMessageError] = None
    violations: tuple[CommitMessageError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[str]:
        """Stable name of the rejecting error, e.g. ``MissingDescription``."""
        return self.error.kind if self.error else None
