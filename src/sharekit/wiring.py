from __future__ import annotations

from typing import Optional

import httpx

from sharekit.capability.mailto import MailtoSharePlatform
from sharekit.capability.platform import SharePlatform
from sharekit.capability.webhook import WebhookSharePlatform
from sharekit.models.share_config import MailtoPlatformConfig, PlatformConfig, WebhookPlatformConfig


def build_share_platform(
    cfg: PlatformConfig,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> SharePlatform:
    # This wiring module is the only layer allowed to read the pydantic config.
    if isinstance(cfg, WebhookPlatformConfig):
        return WebhookSharePlatform(
            str(cfg.url),
            timeout_seconds=float(cfg.timeout_seconds),
            headers=dict(cfg.headers),
            client=client,
        )

    if isinstance(cfg, MailtoPlatformConfig):
        return MailtoSharePlatform(recipients=cfg.recipients)

    raise ValueError(f"Unsupported share platform kind: {getattr(cfg, 'kind', None)!r}")
