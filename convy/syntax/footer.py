"""Parser for footer (trailer) lines."""

import logging
from typing import Optional

from convy.models import BREAKING_CHANGE_TOKEN, Footer

logger = logging.getLogger(__name__)

HASH_SEPARATOR = " #"
COLON_SEPARATOR = ": "

# Both spellings are accepted as a token, compared ignoring case
BREAKING_CHANGE_SPELLINGS = ("BREAKING CHANGE", "BREAKING-CHANGE")


def normalize_token(token: str) -> str:
    """Canonicalize the BREAKING CHANGE spellings; leave other tokens as written."""
    if token.upper() in BREAKING_CHANGE_SPELLINGS:
        return BREAKING_CHANGE_TOKEN
    return token


def _is_breaking_token(token: str) -> bool:
    return token.upper() in BREAKING_CHANGE_SPELLINGS


def _valid_token(token: str) -> bool:
    # Footer tokens use '-' in place of whitespace, except BREAKING CHANGE
    if not token or ":" in token:
        return False
    return _is_breaking_token(token) or not any(ch.isspace() for ch in token)


class FooterParser:
    """Parser for ``Token: value`` and ``Token #value`` footer lines.

    The ``#`` form is tried first, so ``Refs #42`` yields ``("Refs", "42")``.
    """

    def parse_line(self, line: str) -> Optional[Footer]:
        """Classify a single line.

        Args:
            line: One line of the message, without its line ending

        Returns:
            Footer if the line follows either footer grammar, otherwise None
        """
        text = line.strip()
        if not text:
            return None

        footer = self._parse_hash(text)
        if footer is None:
            footer = self._parse_colon(text)
        return footer

    def is_footer(self, line: str) -> bool:
        return self.parse_line(line) is not None

    def _parse_hash(self, text: str) -> Optional[Footer]:
        token, sep, value = text.partition(HASH_SEPARATOR)
        if not sep:
            return None
        value = value.strip()
        if not _valid_token(token) or not value:
            return None
        return Footer(normalize_token(token), value)

    def _parse_colon(self, text: str) -> Optional[Footer]:
        token, sep, value = text.partition(COLON_SEPARATOR)
        if not sep:
            # A bare "BREAKING CHANGE:" line carries no value
            if text.endswith(":") and _is_breaking_token(text[:-1]):
                return Footer(BREAKING_CHANGE_TOKEN, "")
            return None
        value = value.strip()
        if not _valid_token(token):
            return None
        if not value:
            if _is_breaking_token(token):
                return Footer(BREAKING_CHANGE_TOKEN, "")
            return None
        return Footer(normalize_token(token), value)

    def parse(self, lines: list[str]) -> list[Footer]:
        """Parse a footer block.

        Duplicate tokens (ignoring case) keep the first occurrence, except
        BREAKING-CHANGE, where the last occurrence's value replaces the
        earlier one in place.

        Args:
            lines: Footer lines in message order

        Returns:
            Footers in message order
        """
        footers: list[Footer] = []
        for line in lines:
            footer = self.parse_line(line)
            if footer is None:
                logger.debug("Ignoring non-footer line %r", line)
                continue

            existing = next(
                (i for i, item in enumerate(footers) if item.matches(footer.token)),
                None,
            )
            if existing is None:
                footers.append(footer)
            elif footer.is_breaking_change:
                footers[existing] = footer
            else:
                logger.debug("Dropping duplicate footer %r", footer.token)

        return footers
