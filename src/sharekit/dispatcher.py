from __future__ import annotations

import asyncio
import inspect
from typing import Any, Mapping, Optional

from sharekit.bootstrap import load_builtin_parsers
from sharekit.core.contracts import ActionContext, ActionEnvelope
from sharekit.core.exceptions import MalformedPayloadError
from sharekit.core.logger import get_logger, push_action_id, reset_action_id
from sharekit.parsers.registry import ParserRegistry

log = get_logger(__name__)


class ActionDispatcher:
    """
    Routes action envelopes to the parser registered for their ``type``.

    One envelope is decoded and executed per call. Errors from decoding or from
    the capability propagate to the caller; nothing is retried.

    Example:
        >>> dispatcher = ActionDispatcher()
        >>> await dispatcher.dispatch({"type": "share", "data": {"text": "hi"}})
        ShareResult(raw='...', status=<ShareResultStatus.SUCCESS: 'success'>)
    """

    def __init__(self, *, load_builtins: bool = True):
        if load_builtins:
            load_builtin_parsers()

    def decode(self, action: ActionEnvelope) -> Any:
        """Resolve the parser for ``action`` and return its decoded model."""
        return ParserRegistry.get(_action_type(action)).get_model(action)

    async def dispatch(self, action: ActionEnvelope, context: Optional[ActionContext] = None) -> Any:
        context = context or ActionContext()
        action_type = _action_type(action)
        parser = ParserRegistry.get(action_type)

        token = push_action_id(context.action_id)
        try:
            log.info(f"Dispatching action type={action_type!r} via {parser.__class__.__name__}")
            model = parser.get_model(action)
            result = parser.on_call(context, model)
            if inspect.isawaitable(result):
                result = await result
            log.info(f"Action type={action_type!r} completed")
            return result
        except Exception as e:
            log.error(f"Action type={action_type!r} failed: {e}")
            raise
        finally:
            reset_action_id(token)

    def dispatch_sync(self, action: ActionEnvelope, context: Optional[ActionContext] = None) -> Any:
        return asyncio.run(self.dispatch(action, context))


def _action_type(action: ActionEnvelope) -> str:
    if not isinstance(action, Mapping):
        raise MalformedPayloadError(
            reason="Action envelope must be a mapping",
            details={"got": type(action).__name__},
        )
    action_type = action.get("type")
    if not isinstance(action_type, str) or not action_type:
        raise MalformedPayloadError(
            reason="Action envelope has no type",
            details={"keys": sorted(str(k) for k in action.keys())},
        )
    return action_type
