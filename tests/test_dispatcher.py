from unittest.mock import AsyncMock, MagicMock

import pytest

from sharekit.bootstrap import load_builtin_parsers
from sharekit.capability.platform import SharePlus
from sharekit.capability.types import ShareParams, ShareResult, ShareResultStatus, ShareUri
from sharekit.core.contracts import ActionContext
from sharekit.core.exceptions import MalformedPayloadError, ParserRegistryError
from sharekit.core.logger import current_action_id
from sharekit.dispatcher import ActionDispatcher
from sharekit.models.share_request import ShareRequest
from sharekit.parsers.registry import ParserRegistry


def setup_function() -> None:
    # Re-import builtins so decorators re-register after the clear.
    load_builtin_parsers(reload=True)


def _install_fake_share():
    from sharekit.parsers.share import ShareActionParser

    share = MagicMock(spec=SharePlus)
    share.share = AsyncMock(return_value=ShareResult(raw="ok", status=ShareResultStatus.SUCCESS))
    ParserRegistry.register(ShareActionParser(share=share), overwrite=True)
    return share


def test_builtin_share_parser_is_registered():
    assert ParserRegistry.get("share").action_type == "share"


@pytest.mark.asyncio
async def test_dispatch_share_envelope_end_to_end():
    share = _install_fake_share()
    envelope = {"type": "share", "data": {"text": "Check this out", "uri": "https://example.com"}}

    result = await ActionDispatcher().dispatch(envelope)

    assert result.status is ShareResultStatus.SUCCESS
    share.share.assert_awaited_once_with(
        ShareParams(text="Check this out", uri=ShareUri("https://example.com"))
    )


def test_dispatch_sync_runs_the_share():
    share = _install_fake_share()

    result = ActionDispatcher().dispatch_sync({"type": "share", "data": {"uri": "/articles/42"}})

    assert result.raw == "ok"
    share.share.assert_awaited_once_with(ShareParams(uri=ShareUri("/articles/42")))


def test_decode_returns_model_without_sharing():
    share = _install_fake_share()

    model = ActionDispatcher().decode({"type": "share", "data": {"title": "t"}})

    assert model == ShareRequest(title="t")
    share.share.assert_not_called()


@pytest.mark.asyncio
async def test_dispatch_supports_synchronous_parsers():
    class EchoParser:
        action_type = "echo"

        def get_model(self, action):
            return action["data"]

        def on_call(self, context, model):
            return model

    ParserRegistry.register(EchoParser())

    assert await ActionDispatcher().dispatch({"type": "echo", "data": {"a": 1}}) == {"a": 1}


@pytest.mark.asyncio
@pytest.mark.parametrize("envelope", [None, [], {}, {"type": ""}, {"type": 3, "data": {}}])
async def test_dispatch_rejects_envelope_without_type(envelope):
    with pytest.raises(MalformedPayloadError):
        await ActionDispatcher().dispatch(envelope)


@pytest.mark.asyncio
async def test_dispatch_unknown_type_raises():
    with pytest.raises(ParserRegistryError, match="No parser registered"):
        await ActionDispatcher().dispatch({"type": "navigate", "data": {}})


@pytest.mark.asyncio
async def test_dispatch_missing_data_raises():
    _install_fake_share()

    with pytest.raises(MalformedPayloadError):
        await ActionDispatcher().dispatch({"type": "share"})


@pytest.mark.asyncio
async def test_capability_failure_propagates_without_retry():
    share = _install_fake_share()
    share.share.side_effect = PermissionError("share sheet unavailable")

    with pytest.raises(PermissionError, match="unavailable"):
        await ActionDispatcher().dispatch({"type": "share", "data": {"text": "hi"}})

    assert share.share.await_count == 1


@pytest.mark.asyncio
async def test_action_id_is_scoped_to_dispatch():
    seen = []

    class RecordingParser:
        action_type = "record"

        def get_model(self, action):
            return None

        async def _run(self):
            seen.append(current_action_id())

        def on_call(self, context, model):
            return self._run()

    ParserRegistry.register(RecordingParser())
    context = ActionContext(action_id="act-123")

    await ActionDispatcher().dispatch({"type": "record"}, context)

    assert seen == ["act-123"]
    assert current_action_id() == "-"
