"""
Share capability facade.

``SharePlus`` checks the argument combinations the share surface cannot honour
and hands the rest to a ``SharePlatform``. Nothing here retries, times out or
translates errors: whatever the platform raises reaches the caller as is.
"""

from __future__ import annotations

from typing import ClassVar, Optional, Protocol

from sharekit.capability.types import ShareParams, ShareResult
from sharekit.core.exceptions import CapabilityUnavailableError
from sharekit.core.logger import get_logger

log = get_logger(__name__)


class SharePlatform(Protocol):
    async def share(self, params: ShareParams) -> ShareResult:
        ...


def check_share_params(params: ShareParams) -> None:
    """Raise ValueError for parameter combinations the share surface rejects."""
    if params.uri is not None and params.text is not None:
        raise ValueError("uri and text cannot be provided at the same time")
    if params.uri is not None and params.files:
        raise ValueError("uri and files cannot be provided at the same time")
    if params.uri is None and not params.text and not params.files:
        raise ValueError("at least one of uri, files or text must be provided")
    if params.file_name_overrides is not None:
        file_count = len(params.files or [])
        if len(params.file_name_overrides) != file_count:
            raise ValueError(
                "file_name_overrides must match the number of files "
                f"({len(params.file_name_overrides)} != {file_count})"
            )


class SharePlus:
    """Process-wide entry point to the share capability.

    Usage:
        >>> SharePlus.configure(WebhookSharePlatform("https://hooks.example.test/share"))
        >>> result = await SharePlus.instance.share(ShareParams(text="hello"))
    """

    instance: ClassVar["SharePlus"]

    def __init__(self, platform: Optional[SharePlatform] = None):
        self.platform = platform

    @classmethod
    def configure(cls, platform: Optional[SharePlatform]) -> "SharePlus":
        """Install ``platform`` on the shared instance and return it."""
        cls.instance.platform = platform
        return cls.instance

    async def share(self, params: ShareParams) -> ShareResult:
        check_share_params(params)
        if self.platform is None:
            raise CapabilityUnavailableError(
                "No share platform configured; call SharePlus.configure() first"
            )
        log.debug(f"Sharing via {self.platform.__class__.__name__}: {params.to_dict()}")
        return await self.platform.share(params)


SharePlus.instance = SharePlus()
