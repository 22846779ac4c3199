"""
Coded errors shared by the vPIC domain and the HTTP layer.

Every error carries a stable ``code``, a human message, a ``data`` payload
that is safe to return to API clients, and the HTTP status it maps to.
"""

from typing import Any


class CodedError(Exception):
    """Base class for errors rendered as ``{"code", "message", "data"}``."""

    code: str = "INTERNAL_ERROR"
    status_code: int = 500

    def __init__(self, message: str, data: dict[str, Any] | None = None, inner_error: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.data = data or {}
        self.inner_error = inner_error

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "data": self.data}


class SearchByVinError(CodedError):
    """The provider could not decode a VIN into a usable vehicle."""

    code = "SEARCH_BY_VIN_FAILED"
    status_code = 400

    MISSING_IDENTITY = "missing_identity"
    REJECTED_STATUS = "rejected_status"

    def __init__(self, message: str, reason: str, data: dict[str, Any] | None = None):
        super().__init__(message, data)
        self.reason = reason


class VpicProviderError(CodedError):
    """The vPIC provider call itself failed (transport, HTTP status, bad body)."""

    code = "VPIC_PROVIDER_ERROR"
    status_code = 502
