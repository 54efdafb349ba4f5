"""Commit message parser for conventional commits."""

import logging
from typing import Optional

from convy.config import Config
from convy.errors import CommitMessageError
from convy.lexer import Tokenizer
from convy.models import CommitMessage, Footer, ValidationResult
from convy.syntax import BodyFooterSplitter, FooterParser, Header, HeaderParser
from convy.validation import CommitValidator

logger = logging.getLogger(__name__)


class CommitMessageParser:
    """Parser and validator for conventional commit messages.

    Parses messages in the format:

        type(scope)!: description

        optional body paragraphs

        Token: value
        Token #value

    Examples:
        feat(auth): add login functionality
        fix: resolve memory leak
        refactor!: drop python 3.8 support
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self._tokenizer = Tokenizer()
        self._header_parser = HeaderParser(self._tokenizer)
        self._footer_parser = FooterParser()
        self._splitter = BodyFooterSplitter(
            self._footer_parser, strict=self.config.strict_footers
        )
        self._validator = CommitValidator(self.config)

    def _parse_parts(self, message: str) -> tuple[Header, Optional[str], list[Footer]]:
        # Only the header line is tokenized
        newline = message.find("\n")
        header_text = message if newline == -1 else message[:newline + 1]
        tokens = self._tokenizer.tokenize(header_text)
        header = self._header_parser.parse(message, tokens)

        line_break = next((token for token in tokens if token.is_line_break), None)
        rest = message[line_break.end:] if line_break else ""

        split = self._splitter.split(rest)
        footers = self._footer_parser.parse(list(split.footer_lines))
        return header, split.body, footers

    def parse(self, message: str) -> CommitMessage:
        """Parse and validate a commit message.

        Args:
            message: The full commit message

        Returns:
            CommitMessage with type, scope, description, body and footers

        Raises:
            CommitMessageError: If the message is malformed or violates policy
        """
        header, body, footers = self._parse_parts(message)
        return self._validator.validate(header, body, footers)

    def check(self, message: str) -> ValidationResult:
        """Parse and validate, reporting rejection as data.

        Args:
            message: The full commit message

        Returns:
            ValidationResult holding the commit, or the first error along
            with every violated validation gate
        """
        try:
            header, body, footers = self._parse_parts(message)
        except CommitMessageError as e:
            return ValidationResult(error=e, violations=(e,))

        violations = self._validator.violations(header, footers)
        if violations:
            return ValidationResult(error=violations[0], violations=tuple(violations))

        commit = self._validator.validate(header, body, footers)
        return ValidationResult(commit=commit)


def parse_commit_message(message: str, config: Optional[Config] = None) -> CommitMessage:
    """Parse and validate a commit message, raising on rejection."""
    return CommitMessageParser(config).parse(message)


def check_commit_message(message: str, config: Optional[Config] = None) -> ValidationResult:
    """Parse and validate a commit message without raising."""
    return CommitMessageParser(config).check(message)
