from __future__ import annotations

from typing import Any, Optional


class JiraAPIError(RuntimeError):
    """Jira call failed; ``status_code`` mirrors the upstream status (500 if none)."""

    def __init__(self, message: str, status_code: int = 500, data: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.data = data


class JiraValidationError(JiraAPIError):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)
