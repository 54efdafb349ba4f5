"""Separation of the commit body from the trailing footer block."""

import logging
from dataclasses import dataclass
from typing import Optional

from convy.errors import InvalidFooterLineError
from convy.syntax.footer import FooterParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitResult:
    """Body text and the footer lines that follow it."""

    body: Optional[str]
    footer_lines: tuple[str, ...] = ()


def _is_blank(line: str) -> bool:
    return not line.strip()


class BodyFooterSplitter:
    """Splits the text after the header into body and footer block.

    Lines are scanned from the end backward. Footer-shaped lines are
    collected until either a non-footer line or, once a footer has been
    seen, a blank line is reached; that line and everything above it is
    the body. A footer-shaped line inside an earlier paragraph therefore
    stays in the body.
    """

    def __init__(self, footer_parser: Optional[FooterParser] = None, strict: bool = False):
        """Initialize the splitter.

        Args:
            footer_parser: Classifier for footer lines
            strict: Raise InvalidFooterLineError for a non-footer line that
                shares a paragraph with the footers, instead of treating
                it as body
        """
        self._footer_parser = footer_parser or FooterParser()
        self._strict = strict

    def split(self, text: str) -> SplitResult:
        """Split text into body and footer lines.

        Args:
            text: Message text after the header line

        Returns:
            SplitResult with the body (None if empty) and footer lines

        Raises:
            InvalidFooterLineError: In strict mode only
        """
        lines = [line.rstrip("\r") for line in text.split("\n")]

        # Skip the blank line(s) separating the header
        start = 0
        while start < len(lines) and _is_blank(lines[start]):
            start += 1
        lines = lines[start:]

        first_footer = None
        last_footer = None
        for index in range(len(lines) - 1, -1, -1):
            line = lines[index]
            if _is_blank(line):
                if first_footer is not None:
                    break
                continue

            if self._footer_parser.is_footer(line):
                first_footer = index
                if last_footer is None:
                    last_footer = index
                continue

            if first_footer is not None and self._strict:
                raise InvalidFooterLineError(line.strip())
            break

        if first_footer is None:
            return SplitResult(body=self._join_body(lines))

        footer_lines = tuple(lines[first_footer:last_footer + 1])
        logger.debug("Found %d footer line(s)", len(footer_lines))
        return SplitResult(
            body=self._join_body(lines[:first_footer]),
            footer_lines=footer_lines,
        )

    @staticmethod
    def _join_body(lines: list[str]) -> Optional[str]:
        """Join body lines, trimming trailing blank lines."""
        end = len(lines)
        while end > 0 and _is_blank(lines[end - 1]):
            end -= 1
        if end == 0:
            return None
        return "\n".join(lines[:end])
