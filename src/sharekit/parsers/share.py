from __future__ import annotations

from typing import Awaitable, Mapping, Optional

from sharekit.capability.platform import SharePlus
from sharekit.capability.types import ShareResult
from sharekit.core.contracts import ActionContext, ActionEnvelope
from sharekit.core.exceptions import MalformedPayloadError
from sharekit.models.share_request import ShareRequest
from sharekit.parsers.registry import register_parser


@register_parser()
class ShareActionParser:
    """Handles ``{"type": "share", "data": {...}}`` by calling the share capability."""

    action_type = "share"

    def __init__(self, share: Optional[SharePlus] = None):
        self._share = share

    @property
    def share(self) -> SharePlus:
        # Resolved per call so SharePlus.configure() after registration takes effect.
        return self._share if self._share is not None else SharePlus.instance

    def get_model(self, action: ActionEnvelope) -> ShareRequest:
        if not isinstance(action, Mapping) or "data" not in action:
            raise MalformedPayloadError(
                reason="Share action has no data",
                details={"action_type": self.action_type},
            )
        return ShareRequest.from_json(action["data"])

    def on_call(self, context: ActionContext, model: ShareRequest) -> Awaitable[ShareResult]:
        return self.share.share(model.to_share_params())
