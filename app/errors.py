# app/errors.py

from typing import Optional


class AnalysisError(Exception):
    """Base class for every failure surfaced to the editor session."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AnalysisError):
    """Input rejected locally; never reaches the network."""


class TransportError(AnalysisError):
    """The request could not complete or the response body was unusable."""


class ServiceError(AnalysisError):
    """The analysis service answered with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code})"
