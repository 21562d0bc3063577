from __future__ import annotations

from typing import Dict, Optional

import httpx

from sharekit.capability.types import ShareParams, ShareResult, ShareResultStatus
from sharekit.core.logger import get_logger

log = get_logger(__name__)


class WebhookSharePlatform:
    """Delivers share content to an HTTP endpoint as a JSON document.

    Only the textual fields travel; attached files are announced by name and
    never uploaded.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.headers = dict(headers or {})
        self._client = client

    async def share(self, params: ShareParams) -> ShareResult:
        if params.files:
            log.warning(f"Webhook share does not upload files; sending {len(params.files)} name(s) only")

        body = params.to_dict()
        if self._client is not None:
            resp = await self._client.post(self.url, json=body, headers=self.headers)
        else:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                resp = await client.post(self.url, json=body, headers=self.headers)
        resp.raise_for_status()

        log.info(f"Share delivered to {self.url} (status={resp.status_code})")
        return ShareResult(raw=self.url, status=ShareResultStatus.SUCCESS)
