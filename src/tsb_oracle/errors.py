"""Error taxonomy surfaced to callers.

Every error is terminal for the request that raised it; nothing is retried.
"""

from __future__ import annotations


class OracleError(Exception):
    """Base class for all request failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthorized(OracleError):
    """Raised when a price update does not come from the admin identity."""

    def __init__(self, sender: str):
        super().__init__("Unauthorized")
        self.sender = sender


class NotInitialized(OracleError):
    """Raised when a state slot is read before initialize() wrote it."""

    def __init__(self, key: str):
        super().__init__(f"State slot '{key}' is not initialized")
        self.key = key


class InvalidAddress(OracleError):
    """Raised when an admin identity is empty or whitespace-padded."""


class NoOracleContact(OracleError):
    """Raised when the oracle contact lookup returns no entries."""

    def __init__(self) -> None:
        super().__init__("No oracle contacts found")


class OracleFieldError(OracleError):
    """Base class for contact text parsing failures."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class FieldNotFound(OracleFieldError):
    def __init__(self, key: str):
        super().__init__(key, f"{key} not found in contact data")


class FieldMalformed(OracleFieldError):
    def __init__(self, key: str):
        super().__init__(key, f"{key} format invalid")


class FieldUnparseable(OracleFieldError):
    def __init__(self, key: str, value: str, reason: str):
        super().__init__(key, f"{key} parse error: {reason} ({value!r})")
        self.value = value


class UpstreamQueryFailed(OracleError):
    """Raised when a primitive lookup against the data source fails."""

    def __init__(self, method: str, reason: str):
        super().__init__(f"Query '{method}' failed: {reason}")
        self.method = method
        self.reason = reason


class UnknownRequest(OracleError):
    """Raised when an incoming payload does not decode to a known request."""
