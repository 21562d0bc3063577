"""sharekit.

Share action adapter for server-driven UI.

Decodes ``{"type": "share", "data": {...}}`` actions into typed share requests
and hands them to a pluggable share platform (webhook, mail composer, ...).

Public API for clients embedding the adapter in their action dispatch.
"""

from sharekit.capability.platform import SharePlus
from sharekit.capability.types import ShareParams, ShareResult, ShareResultStatus, ShareUri
from sharekit.dispatcher import ActionDispatcher
from sharekit.models.share_request import ShareRequest
from sharekit.parsers.registry import ParserRegistry, register_parser
from sharekit.parsers.share import ShareActionParser

__version__ = "0.1.0"

__all__ = [
    "ActionDispatcher",
    "ParserRegistry",
    "ShareActionParser",
    "SharePlus",
    "ShareParams",
    "ShareRequest",
    "ShareResult",
    "ShareResultStatus",
    "ShareUri",
    "register_parser",
]
