from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from sharekit.core.contracts import ActionContext, ActionEnvelope

ModelT = TypeVar("ModelT")


@runtime_checkable
class ActionParser(Protocol[ModelT]):
    """Decodes one action type and executes it.

    ``on_call`` may return a plain value or an awaitable; the dispatcher awaits
    the latter.
    """

    action_type: str

    def get_model(self, action: ActionEnvelope) -> ModelT:
        ...

    def on_call(self, context: ActionContext, model: ModelT) -> Any:
        ...
