"""
Errors surfaced by the storefront data layer

Every failure reaches the caller as the error argument of an Action's
completion callback; inside the pipeline they travel as exceptions.
"""
from typing import Optional


class StorefrontError(Exception):
    """Base class for all data layer errors"""


class NetworkError(StorefrontError):
    """Transport failure or no reply from the remote"""

    def __init__(self, message: str = "No response from remote", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DecodingError(StorefrontError):
    """Payload doesn't match the expected shape"""


class RemoteError(StorefrontError):
    """
    Structured error entity returned by the API

    Decoded from error-shaped payloads such as
    {"error": "unauthorized", "message": "..."}
    """

    def __init__(self, code: str, message: str = "", status: Optional[int] = None):
        super().__init__(f"{code}: {message}" if message else code)
        self.code = code
        self.message = message
        self.status = status

    def __eq__(self, other):
        if not isinstance(other, RemoteError):
            return NotImplemented
        return (self.code, self.message, self.status) == (other.code, other.message, other.status)

    def __hash__(self):
        return hash((self.code, self.message, self.status))


class StorageError(StorefrontError):
    """Local storage couldn't persist a fetched entity"""
