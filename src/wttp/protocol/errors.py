"""Protocol-level exceptions.

Structural problems with a response are always raised; status codes on a
well-formed GET or HEAD response are data, and are never raised here.
"""

from __future__ import annotations


class ProtocolError(Exception):
    """Base class for all WTTP protocol errors."""


class MalformedResponse(ProtocolError, ValueError):
    """A response had the wrong positional shape, a non-numeric value where
    a number is required, an unknown protocol version, or a body that could
    not be decoded."""


class UnsupportedCharset(ProtocolError, LookupError):
    """A text body declared a charset with no known decoding."""

    def __init__(self, charset: str):
        super().__init__(f"unsupported charset: {charset!r}")
        self.charset = charset


class TransportRejected(ProtocolError):
    """The remote endpoint rejected a state-changing request. The raw
    result, if any, is kept on the exception for inspection."""

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result
