"""Lexical scanning of commit messages."""

from convy.lexer.tokenizer import (
    TOKEN_RULES,
    Token,
    TokenKind,
    TokenRule,
    Tokenizer,
    first_line_tokens,
    scan_token,
)

__all__ = [
    "TOKEN_RULES",
    "Token",
    "TokenKind",
    "TokenRule",
    "Tokenizer",
    "first_line_tokens",
    "scan_token",
]
