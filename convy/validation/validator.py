"""Policy checks applied to a parsed commit message."""

import logging
from typing import Optional

from convy.config import Config
from convy.errors import (
    BreakingChangeFooterWithoutMarkerError,
    CommitMessageError,
    InvalidCommitTypeError,
    MissingBreakingChangeFooterError,
)
from convy.models import CommitMessage, Footer
from convy.syntax import Header

logger = logging.getLogger(__name__)


class CommitValidator:
    """Validator for parsed conventional commits.

    Two gates are evaluated in order: the commit type must be allowed, and
    the header '!' marker must agree with the BREAKING-CHANGE footer.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def violations(self, header: Header, footers: list[Footer]) -> list[CommitMessageError]:
        """Evaluate every gate.

        Args:
            header: Parsed header
            footers: Parsed footers

        Returns:
            Errors for each violated gate, type gate first
        """
        errors = []

        type_error = self._check_type(header.commit_type)
        if type_error:
            errors.append(type_error)

        breaking_error = self._check_breaking_change(header.breaking, footers)
        if breaking_error:
            errors.append(breaking_error)

        return errors

    def validate(
        self, header: Header, body: Optional[str], footers: list[Footer]
    ) -> CommitMessage:
        """Assemble a CommitMessage if every gate passes.

        Raises:
            CommitMessageError: The first violated gate's error
        """
        errors = self.violations(header, footers)
        if errors:
            logger.debug("Commit rejected: %s", ", ".join(e.kind for e in errors))
            raise errors[0]

        return CommitMessage(
            commit_type=header.commit_type.lower(),
            scope=header.scope,
            description=header.description,
            body=body,
            footers=tuple(footers),
            breaking=header.breaking,
        )

    def _check_type(self, commit_type: str) -> Optional[CommitMessageError]:
        allowed = self.config.allowed_types
        if commit_type.lower() not in allowed:
            return InvalidCommitTypeError(commit_type, sorted(allowed))
        return None

    def _check_breaking_change(
        self, breaking: bool, footers: list[Footer]
    ) -> Optional[CommitMessageError]:
        has_footer = any(footer.is_breaking_change for footer in footers)

        if breaking and not has_footer and self.config.require_breaking_change_footer:
            return MissingBreakingChangeFooterError()

        # Applies regardless of configuration
        if has_footer and not breaking:
            return BreakingChangeFooterWithoutMarkerError()

        return None
