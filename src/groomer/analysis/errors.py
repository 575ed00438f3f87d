from __future__ import annotations

from typing import Optional

from .normalizer import NormalizationError


class AnalysisError(RuntimeError):
    """Base error for ticket analysis; carries the HTTP status to surface."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class TicketValidationError(AnalysisError):
    status_code = 400


class AnalysisFailedError(AnalysisError):
    """The model output could not be normalized, even after any repair."""

    def __init__(self, message: str, normalization_error: NormalizationError):
        super().__init__(message)
        self.normalization_error = normalization_error
