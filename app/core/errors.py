# app/core/errors.py
from __future__ import annotations

from typing import Optional


class KitchenError(Exception):
    """Base class for failures scoped to a single user action."""

    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidationError(KitchenError):
    """Rejected before any network or store call. The message is already localized."""

    http_status = 400


class PersistenceError(KitchenError):
    http_status = 500


class GenerationError(KitchenError):
    kind = "generation_error"
    http_status = 502


class InvalidRequestError(GenerationError):
    kind = "invalid_request"
    http_status = 400


class ServiceMisconfiguredError(GenerationError):
    kind = "service_misconfigured"
    http_status = 502


class RateLimitedError(GenerationError):
    kind = "rate_limited"
    http_status = 429


class ServiceUnavailableError(GenerationError):
    kind = "service_unavailable"
    http_status = 503


class UpstreamError(GenerationError):
    kind = "upstream_error"

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class EmptyResponseError(GenerationError):
    kind = "empty_response"


class ConnectivityError(GenerationError):
    kind = "connectivity"
    http_status = 504


class ProxyError(Exception):
    """Raised by the chat proxy; rendered as the {error, details} envelope."""

    def __init__(self, status_code: int, error: str, details: Optional[str] = None):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details

    def envelope(self) -> dict:
        out = {"error": self.error}
        if self.details:
            out["details"] = self.details
        return out
