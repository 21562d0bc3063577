from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

# Untyped wire-format action: {"type": "...", "data": {...}}
ActionEnvelope = Mapping[str, Any]


@dataclass
class ActionContext:
    """Framework-provided execution context for a single action invocation.

    Parsers receive it opaquely; the share parser never consults it. The
    dispatcher uses ``action_id`` to correlate log lines for one invocation.
    """
    action_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    source: Optional[str] = None                 # Screen/widget that fired the action
    environment: Optional[str] = None            # dev/qa/prod
    metadata: Dict[str, Any] = field(default_factory=dict)  # Extensibility hook
