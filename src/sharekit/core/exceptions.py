"""
Custom exception classes for the sharekit package.

Structural problems with an inbound action are fatal to that single action and
propagate to the dispatcher's caller. Field-level leniency (optional fields, an
unparsable ``uri``) never raises. Errors raised by the share capability itself
are not wrapped here; they reach the caller unchanged.
"""

from typing import Any, Dict, Optional


class SharekitException(Exception):
    """Base exception class for all sharekit exceptions."""

    pass


class MalformedPayloadError(SharekitException):
    """
    Raised when an action envelope or its ``data`` sub-map cannot be decoded.

    This occurs when:
    - The envelope is not a mapping or has no string ``type``
    - The ``data`` key is missing
    - ``data`` is present but is not a mapping

    Example:
        >>> raise MalformedPayloadError(
        ...     reason="Action data must be a mapping",
        ...     details={"action_type": "share", "got": "list"}
        ... )
    """

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.details = details or {}
        message = f"{reason}"
        if self.details:
            message += f" - {self.details}"
        super().__init__(message)


class ParserRegistryError(SharekitException, RuntimeError):
    """Raised when an action type is registered twice or cannot be resolved."""

    pass


class CapabilityUnavailableError(SharekitException):
    """Raised when the share facade is invoked before a platform is configured."""

    pass
