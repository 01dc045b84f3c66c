"""Error types raised by ProductSetManager."""

from typing import Optional


class UsageError(Exception):
    """Bad or missing command-line arguments. No remote call was made."""


class ConfigError(ValueError):
    """Required configuration is missing or malformed."""


class RemoteCallError(Exception):
    """A call to the Product Search service failed.

    Attributes:
        code: Status code reported by the client library, if any.
        message: Human readable description of the failure.
    """

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"{self.code} {self.message}"


__all__ = ["UsageError", "ConfigError", "RemoteCallError"]
