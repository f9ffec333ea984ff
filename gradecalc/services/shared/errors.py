from __future__ import annotations

from typing import Any, Dict, Optional


class ServiceError(Exception):
    """Base class for service-layer errors."""


class ValidationError(ServiceError):
    """Raised when input payload is invalid."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str = "INVALID_PAYLOAD",
        field: Optional[str] = None,
        observed_sum: Optional[float] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.field = field
        self.observed_sum = observed_sum

    def as_payload(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "status": "error",
            "error_code": self.error_code,
            "error": self.message,
        }
        if self.field:
            out["field"] = self.field
        if self.observed_sum is not None:
            out["observed_sum"] = round(float(self.observed_sum), 2)
        return out


class ExternalDependencyError(ServiceError):
    """Raised when external dependency (LLM advisory) fails."""


class AdvisoryResponseError(ExternalDependencyError):
    """Raised when the advisory reply is not valid JSON or breaks the verdict schema."""
