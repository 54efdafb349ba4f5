"""Parser for the commit header line."""

from dataclasses import dataclass
from typing import Optional

from convy.errors import (
    MalformedHeaderError,
    MissingCommitTypeError,
    MissingDescriptionError,
    MissingHeaderLineError,
)
from convy.lexer import Token, TokenKind, Tokenizer, first_line_tokens


@dataclass(frozen=True)
class Header:
    """Fields recovered from the first line of a commit message."""

    commit_type: str
    scope: Optional[str]
    breaking: bool
    description: str


class HeaderParser:
    """Parser for ``type(scope)!: description`` header lines.

    Examples:
        feat: add login
        fix(parser): handle empty input
        refactor(api)!: drop v1 endpoints

    Only the grammar is checked here; whether the type is allowed is
    decided by the validator.
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self._tokenizer = tokenizer or Tokenizer()

    def parse(self, message: str, tokens: Optional[list[Token]] = None) -> Header:
        """Parse the header from the first line of a message.

        Args:
            message: The full commit message
            tokens: Tokens of ``message``, if already scanned

        Returns:
            Header with type, scope, breaking marker and description

        Raises:
            MissingHeaderLineError: If the message or its first line is blank
            MissingCommitTypeError: If nothing precedes the first delimiter
            MissingDescriptionError: If nothing follows ': '
            MalformedHeaderError: If the line does not follow the grammar
        """
        if not message or not message.strip():
            raise MissingHeaderLineError()

        if tokens is None:
            tokens = self._tokenizer.tokenize(message)

        line = first_line_tokens(tokens)
        if all(token.kind is TokenKind.WHITESPACE for token in line):
            raise MissingHeaderLineError()

        header_end = next(
            (token.start for token in tokens if token.is_line_break), len(message)
        )

        # Type: everything up to the first delimiter
        index = 0
        while index < len(line) and line[index].kind in (TokenKind.WORD, TokenKind.WHITESPACE):
            index += 1

        type_end = line[index].start if index < len(line) else header_end
        raw_type = message[line[0].start:type_end].lstrip()

        if index < len(line) and not raw_type:
            raise MissingCommitTypeError()
        if index == len(line):
            raise MalformedHeaderError("missing ':' after the commit type")
        if any(ch.isspace() for ch in raw_type):
            raise MalformedHeaderError(
                f"commit type '{raw_type.strip()}' must be a single word "
                "directly followed by '(', '!' or ':'"
            )

        scope, index = self._parse_scope(message, line, index)

        breaking = False
        if index < len(line) and line[index].kind is TokenKind.BANG:
            breaking = True
            index += 1
            if index == len(line) or line[index].kind is not TokenKind.COLON:
                raise MalformedHeaderError("'!' must immediately precede ':'")

        if index == len(line):
            raise MalformedHeaderError("missing ':' after the commit type")
        if line[index].kind is not TokenKind.COLON:
            raise MalformedHeaderError(f"unexpected '{line[index].text}' before ':'")

        rest = message[line[index].end:header_end]
        if not rest.strip():
            raise MissingDescriptionError()
        if not rest.startswith(" "):
            raise MalformedHeaderError("':' must be followed by a space")

        return Header(
            commit_type=raw_type,
            scope=scope,
            breaking=breaking,
            description=rest.strip(),
        )

    def _parse_scope(
        self, message: str, line: list[Token], index: int
    ) -> tuple[Optional[str], int]:
        """Parse an optional ``(scope)`` starting at ``index``.

        Returns:
            ``(scope, index)`` with ``index`` just past the closing paren
        """
        if line[index].kind is not TokenKind.LPAREN:
            return None, index

        close = index + 1
        while close < len(line) and line[close].kind is not TokenKind.RPAREN:
            if line[close].kind is TokenKind.LPAREN:
                raise MalformedHeaderError("nested '(' in scope")
            close += 1

        if close == len(line):
            raise MalformedHeaderError("unclosed scope, expected ')'")

        scope = message[line[index].end:line[close].start].strip()
        if not scope:
            raise MalformedHeaderError("empty scope")

        return scope, close + 1
