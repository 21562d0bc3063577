import json

import httpx
import pytest

from sharekit.capability.types import ShareFile, ShareParams, ShareResultStatus, ShareUri
from sharekit.capability.webhook import WebhookSharePlatform


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_webhook_posts_share_fields_as_json():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(202)

    platform = WebhookSharePlatform(
        "https://hooks.example.test/share",
        headers={"X-Token": "abc"},
        client=_client(handler),
    )

    result = await platform.share(ShareParams(uri=ShareUri("https://example.com/a"), title="t"))

    assert result.status is ShareResultStatus.SUCCESS
    assert result.raw == "https://hooks.example.test/share"
    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert seen[0].headers["X-Token"] == "abc"
    assert json.loads(seen[0].content) == {"title": "t", "uri": "https://example.com/a"}


@pytest.mark.asyncio
async def test_webhook_forwards_uri_text_unchanged():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(200)

    platform = WebhookSharePlatform("https://hooks.example.test/share", client=_client(handler))

    await platform.share(ShareParams(uri=ShareUri("https://Example.COM?q=1")))

    assert seen == [{"uri": "https://Example.COM?q=1"}]


@pytest.mark.asyncio
async def test_webhook_sends_file_names_only():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(200)

    platform = WebhookSharePlatform("https://hooks.example.test/share", client=_client(handler))

    await platform.share(ShareParams(text="caption", files=[ShareFile(data=b"\x00", name="pic.png")]))

    assert seen == [{"text": "caption", "files": ["pic.png"]}]


@pytest.mark.asyncio
async def test_webhook_raises_on_http_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    platform = WebhookSharePlatform("https://hooks.example.test/share", client=_client(handler))

    with pytest.raises(httpx.HTTPStatusError):
        await platform.share(ShareParams(text="hi"))
