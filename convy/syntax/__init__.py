"""Grammar recognition for commit headers, bodies and footers."""

from convy.syntax.footer import FooterParser, normalize_token
from convy.syntax.header import Header, HeaderParser
from convy.syntax.splitter import BodyFooterSplitter, SplitResult

__all__ = [
    "BodyFooterSplitter",
    "FooterParser",
    "Header",
    "HeaderParser",
    "SplitResult",
    "normalize_token",
]
