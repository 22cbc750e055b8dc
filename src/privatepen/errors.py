from __future__ import annotations


class PrivatePenError(Exception):
    """Base class for errors raised at the pipeline boundary."""


class EmptyInputError(PrivatePenError, ValueError):
    """Raised when a submission carries no text after trimming."""


class SessionBusyError(PrivatePenError):
    """Raised when a session already has a submission in flight."""


class AnalysisFailure(PrivatePenError):
    """Raised when a transform fails unexpectedly."""

    def __init__(self, operation: str, message: str = "Analysis failed. Please try again.") -> None:
        super().__init__(message)
        self.operation = operation


class StorageError(PrivatePenError):
    """Raised when the persisted record cannot be read or written."""
