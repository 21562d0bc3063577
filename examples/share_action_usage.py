"""
Example: Dispatching server-driven share actions.

This shows the separation between:
- Platform setup: which share surface handles the request (done once per process)
- Actions: JSON envelopes sent by the server, decoded and executed per invocation
"""

import asyncio

from sharekit import ActionDispatcher, SharePlus
from sharekit.capability.mailto import MailtoSharePlatform
from sharekit.capability.webhook import WebhookSharePlatform
from sharekit.core.contracts import ActionContext
from sharekit.core.logger import configure_root_logger

configure_root_logger("INFO")


# =============================================================================
# Example 1: Share a link through a webhook
# =============================================================================
SharePlus.configure(WebhookSharePlatform("https://hooks.example.test/share", timeout_seconds=5))

dispatcher = ActionDispatcher()
result = dispatcher.dispatch_sync(
    {"type": "share", "data": {"uri": "https://example.com/article/42", "title": "Read this"}},
    ActionContext(source="article_screen"),
)
print(f"Webhook share: {result.status.value} -> {result.raw}")


# =============================================================================
# Example 2: Open the mail composer
# =============================================================================
SharePlus.configure(MailtoSharePlatform(recipients=["team@example.com"]))

result = dispatcher.dispatch_sync(
    {"type": "share", "data": {"text": "Check this out", "subject": "Weekly digest"}},
)
print(f"Mail share: {result.status.value}")


# =============================================================================
# Example 3: Inside an existing event loop
# =============================================================================
async def on_button_tap(action: dict) -> None:
    # Awaiting the dispatch waits for the share surface to finish.
    await dispatcher.dispatch(action, ActionContext(source="share_button"))


asyncio.run(on_button_tap({"type": "share", "data": {"text": "Sent from the share button"}}))
