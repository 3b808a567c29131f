"""
Error types raised by the relay pipeline.
"""
from typing import Any, Dict, List, Optional


class RelayError(Exception):
    """Base class for failures that end a relay request."""

    def details(self) -> Dict[str, Any]:
        return {"message": str(self)}


class ValidationError(RelayError):
    """A required body field or credential header is missing."""

    def __init__(self, message: str, missing: Optional[List[str]] = None):
        super().__init__(message)
        self.missing = list(missing or [])


class FetchError(RelayError):
    """The remote file could not be downloaded."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class UpstreamError(RelayError):
    """The downstream upload API answered with a failure status."""

    def __init__(self, status: int, data: Any):
        super().__init__(f"Request failed with status code {status}")
        self.status = status
        self.data = data

    def details(self) -> Dict[str, Any]:
        return {"status": self.status, "data": self.data}


class TransportError(RelayError):
    """The downstream call never produced a response."""


class CleanupWarning(UserWarning):
    """A staging file could not be removed. Only ever logged."""
