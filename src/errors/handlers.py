"""
Error context tracking for non-fatal checker errors.

Files skipped by the loader or the usage scanner are recorded here so the
run can finish and still say what it could not read.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
import structlog

from .exceptions import I18nCheckError

logger = structlog.get_logger(__name__)


class ErrorContextManager:
    """
    Records errors that were tolerated during a run.

    Tracks error types and counts for the final summary.
    """

    def __init__(self, max_history: int = 1000):
        self.max_history = max_history
        self.error_history: List[Dict[str, Any]] = []
        self.error_counts: Dict[str, int] = {}

    def record_error(self, error: I18nCheckError, context: Optional[Dict[str, Any]] = None):
        """Record an error occurrence with context."""
        error_record = {
            "timestamp": datetime.now(timezone.utc),
            "error_type": error.__class__.__name__,
            "message": error.message,
            "error_code": error.error_code,
            "context": {**error.context, **(context or {})},
        }

        self.error_history.append(error_record)

        if len(self.error_history) > self.max_history:
            self.error_history.pop(0)

        error_type = error.__class__.__name__
        self.error_counts[error_type] = self.error_counts.get(error_type, 0) + 1

        logger.warning(
            "Error recorded",
            error_type=error_type,
            message=error.message,
            context=error_record["context"],
            total_count=self.error_counts[error_type]
        )

    @property
    def has_errors(self) -> bool:
        return bool(self.error_history)

    def get_error_stats(self) -> Dict[str, Any]:
        """Get error statistics."""
        return {
            "total_errors": sum(self.error_counts.values()),
            "error_counts": self.error_counts.copy(),
            "most_common": max(self.error_counts.items(), key=lambda x: x[1]) if self.error_counts else None,
            "paths": [r["context"].get("path") for r in self.error_history if r["context"].get("path")],
        }
