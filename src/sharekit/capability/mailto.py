from __future__ import annotations

import webbrowser
from typing import Callable, Iterable, List, Optional
from urllib.parse import quote

from sharekit.capability.types import ShareParams, ShareResult, ShareResultStatus
from sharekit.core.logger import get_logger

log = get_logger(__name__)


def build_mailto_url(params: ShareParams, recipients: Iterable[str] = ()) -> str:
    """Compose a ``mailto:`` link; the body carries text and/or uri, one per line."""
    body_lines: List[str] = []
    if params.text:
        body_lines.append(params.text)
    if params.uri is not None:
        body_lines.append(str(params.uri))

    query: List[str] = []
    if params.subject:
        query.append(f"subject={quote(params.subject)}")
    if body_lines:
        body = "\n".join(body_lines)
        query.append(f"body={quote(body)}")

    to = ",".join(quote(r, safe="@") for r in recipients)
    url = f"mailto:{to}"
    if query:
        url += "?" + "&".join(query)
    return url


class MailtoSharePlatform:
    """Opens the user's mail composer with the share content pre-filled."""

    def __init__(
        self,
        *,
        recipients: Iterable[str] = (),
        opener: Optional[Callable[[str], bool]] = None,
    ):
        self.recipients = list(recipients)
        self._opener = opener if opener is not None else webbrowser.open

    async def share(self, params: ShareParams) -> ShareResult:
        if not params.mail_to_fallback_enabled:
            log.info("Mail composer disabled for this share")
            return ShareResult.unavailable

        if params.files:
            log.warning(f"mailto links cannot carry attachments; dropping {len(params.files)} file(s)")

        url = build_mailto_url(params, self.recipients)
        if not self._opener(url):
            log.warning("No mail handler accepted the mailto link")
            return ShareResult.unavailable
        return ShareResult(raw=url, status=ShareResultStatus.SUCCESS)
