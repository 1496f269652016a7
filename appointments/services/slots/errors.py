"""
Error taxonomy for the availability engine.

Every error is terminal for the request. status_code is what the HTTP
boundary answers with; code is a stable machine-readable reason.
"""


class SlotsError(Exception):
    status_code = 500

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class ValidationError(SlotsError):
    """Missing or malformed request parameters."""
    status_code = 400


class NotFoundError(SlotsError):
    """Service or staff identifier does not resolve."""
    status_code = 404


class PolicyError(SlotsError):
    """Request is well formed but business rules refuse it."""
    status_code = 400


class ConfigError(SlotsError):
    """Business configuration is broken (e.g. schedule missing a weekday)."""
    status_code = 500
