"""Error types for loading the test matrix."""

from __future__ import annotations


class LoadingError(Exception):
    """Raised when the test matrix cannot be loaded. Always fatal to a run."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load matrix tests: {reason}")
        self.reason = reason
