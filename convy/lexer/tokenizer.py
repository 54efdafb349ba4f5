"""Lexical scanner for commit messages.

The scanner is a pure function of ``(text, position)``. Each call returns
the token found at ``position`` and the position just after it, so callers
thread the position through explicitly and no cursor is shared.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    """Kinds of lexical units."""

    DOUBLE_NEWLINE = "double_newline"
    NEWLINE = "newline"
    WHITESPACE = "whitespace"
    LPAREN = "lparen"
    RPAREN = "rparen"
    BANG = "bang"
    COLON = "colon"
    WORD = "word"


@dataclass(frozen=True)
class Token:
    """A lexical unit and the span of the input it covers."""

    kind: TokenKind
    text: str
    start: int
    end: int

    @property
    def is_line_break(self) -> bool:
        return self.kind in (TokenKind.NEWLINE, TokenKind.DOUBLE_NEWLINE)


@dataclass(frozen=True)
class TokenRule:
    """A named classification rule: a pattern anchored at the scan position."""

    kind: TokenKind
    pattern: re.Pattern

    def match(self, text: str, position: int) -> Optional[re.Match]:
        return self.pattern.match(text, position)


# Evaluated top to bottom; the first rule that matches wins.
TOKEN_RULES = (
    TokenRule(TokenKind.DOUBLE_NEWLINE, re.compile(r"\r?\n\r?\n")),
    TokenRule(TokenKind.NEWLINE, re.compile(r"\r?\n")),
    TokenRule(TokenKind.WHITESPACE, re.compile(r"[ \t]+")),
    TokenRule(TokenKind.LPAREN, re.compile(r"\(")),
    TokenRule(TokenKind.RPAREN, re.compile(r"\)")),
    TokenRule(TokenKind.BANG, re.compile(r"!")),
    TokenRule(TokenKind.COLON, re.compile(r":")),
    # Any run of printable characters that is not a delimiter
    TokenRule(TokenKind.WORD, re.compile(r"[^\s():!\x00-\x1f\x7f]+")),
)


def scan_token(text: str, position: int) -> tuple[Optional[Token], int]:
    """Scan one token starting at ``position``.

    Args:
        text: The full input
        position: Offset to scan from

    Returns:
        ``(token, new_position)``. ``token`` is None when the character at
        ``position`` matches no rule; ``new_position`` then skips past it.
        At end of input returns ``(None, position)``.
    """
    if position >= len(text):
        return None, position

    for rule in TOKEN_RULES:
        match = rule.match(text, position)
        if match:
            token = Token(rule.kind, match.group(), match.start(), match.end())
            return token, match.end()

    return None, position + 1


class Tokenizer:
    """Converts a raw commit message into a list of tokens.

    Unrecognized characters are skipped with a logged diagnostic;
    tokenizing never fails.
    """

    def iter_tokens(self, text: str) -> Iterator[Token]:
        position = 0
        while position < len(text):
            token, next_position = scan_token(text, position)
            if token is None:
                logger.warning(
                    "Skipping unrecognized character %r at offset %d",
                    text[position],
                    position,
                )
            else:
                yield token
            position = next_position

    def tokenize(self, text: str) -> list[Token]:
        """Tokenize the whole input.

        Args:
            text: The commit message

        Returns:
            Tokens in input order, whitespace included
        """
        return list(self.iter_tokens(text))


def first_line_tokens(tokens: list[Token]) -> list[Token]:
    """Tokens before the first line break."""
    line = []
    for token in tokens:
        if token.is_line_break:
            break
        line.append(token)
    return line
