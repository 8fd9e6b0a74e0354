"""
Error collection for a validation run.

Failures are accumulated rather than raised so that every offending locale
file is reported in a single pass.
"""

from typing import Any, Dict, List

import structlog

from .exceptions import LocaleValidatorError

logger = structlog.get_logger(__name__)


class ErrorCollector:
    """
    Ordered store of the errors recorded during one run.

    Tracks per-type counts for the final summary.
    """

    def __init__(self):
        self.errors: List[LocaleValidatorError] = []
        self.error_counts: Dict[str, int] = {}

    def record_error(self, error: LocaleValidatorError) -> None:
        """Record an error occurrence."""
        self.errors.append(error)

        error_type = error.__class__.__name__
        self.error_counts[error_type] = self.error_counts.get(error_type, 0) + 1

        logger.debug(
            "Error recorded",
            error_type=error_type,
            message=error.message,
            file=error.file,
            context=error.context,
            total_count=self.error_counts[error_type],
        )

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)

    def get_error_stats(self) -> Dict[str, Any]:
        """Get error statistics for the run summary."""
        return {
            "total_errors": len(self.errors),
            "error_counts": self.error_counts.copy(),
            "files": [error.file for error in self.errors],
        }
