"""
Exceptions raised while fetching and decoding pool accounts.

Callers can catch PoolDecodeError for any failure, or tell apart an account
that could not be retrieved (FetchError) from account data that does not
match the requested pool layout (SchemaError).
"""

from typing import Optional

from solders.pubkey import Pubkey


class PoolDecodeError(Exception):
    """Base exception for pool retrieval."""
    pass


class FetchError(PoolDecodeError):
    """Raised when the account bytes could not be retrieved."""

    def __init__(self, address: Pubkey, cause: Optional[BaseException] = None, message: Optional[str] = None):
        if message is None:
            message = f"could not fetch account {address}: {cause}"
        super().__init__(message)
        self.address = address
        self.cause = cause


class SchemaError(PoolDecodeError):
    """Raised when account bytes do not match the expected pool layout."""

    def __init__(self, kind, reason: str, cause: Optional[BaseException] = None):
        super().__init__(f"{kind.value}: {reason}")
        self.kind = kind
        self.reason = reason
        self.cause = cause
