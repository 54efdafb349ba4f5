"""Exceptions raised while parsing and validating commit messages."""


class CommitMessageError(Exception):
    """Base class for every reason a commit message is rejected.

    Subclasses set ``kind`` to a stable name that callers can match on
    without importing the concrete class.
    """

    kind = "CommitMessageError"
    default_message = "Invalid commit message"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class MissingHeaderLineError(CommitMessageError):
    """The message is empty or its first line is blank."""

    kind = "MissingHeaderLine"
    default_message = "Commit message is missing a header line"


class MissingCommitTypeError(CommitMessageError):
    """No text precedes the first header delimiter."""

    kind = "MissingCommitType"
    default_message = "Commit type is missing"


class InvalidCommitTypeError(CommitMessageError):
    """The commit type is not in the allowed set."""

    kind = "InvalidCommitType"

    def __init__(self, commit_type: str, allowed: list[str] | None = None):
        self.commit_type = commit_type
        message = f"Invalid commit type '{commit_type}'"
        if allowed:
            message += f". Allowed types: {', '.join(allowed)}"
        super().__init__(message)


class MissingDescriptionError(CommitMessageError):
    """Nothing follows the ': ' separator."""

    kind = "MissingDescription"
    default_message = "Description is missing"


class MalformedHeaderError(CommitMessageError):
    """The header line does not follow type(scope)!: description."""

    kind = "MalformedHeader"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid header format: {reason}")


class InvalidFooterLineError(CommitMessageError):
    """A line in the footer paragraph is not a footer (strict mode only)."""

    kind = "InvalidFooterLine"

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Invalid footer line: '{line}'")


class MissingBreakingChangeFooterError(CommitMessageError):
    """The header has '!' but no BREAKING-CHANGE footer is present."""

    kind = "MissingBreakingChangeFooter"
    default_message = "Commit message with '!' must include 'BREAKING-CHANGE' in the footers"


class BreakingChangeFooterWithoutMarkerError(CommitMessageError):
    """A BREAKING-CHANGE footer is present but the header lacks '!'."""

    kind = "BreakingChangeFooterWithoutMarker"
    default_message = "Commit message with 'BREAKING-CHANGE' must include '!' in the header"


class ConfigError(Exception):
    """Exception raised for unreadable or invalid configuration."""

    pass
