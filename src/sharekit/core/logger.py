import logging
import sys
import contextvars
from typing import Optional

# Context variable to carry the current action id across the call chain
_ACTION_ID: contextvars.ContextVar[str] = contextvars.ContextVar("action_id", default="-")


class _ActionFilter(logging.Filter):
    """Logging filter that injects the action_id from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.action_id = _ACTION_ID.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | action=%(action_id)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure root logger and the sharekit-specific logger.

    Root logger stays at INFO to suppress library noise (httpx, httpcore, etc).
    Only sharekit namespace logs are set to the requested level.

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _ActionFilter) for f in h.filters):
            # Already configured; just update sharekit logger level
            logging.getLogger("sharekit").setLevel(getattr(logging, level.upper(), logging.INFO))
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_ActionFilter())
    root.addHandler(handler)
    root.setLevel(logging.INFO)

    logging.getLogger("sharekit").setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str = "sharekit") -> logging.Logger:
    """Get a module-specific logger; handlers are owned by the root configuration."""
    return logging.getLogger(name)


def push_action_id(action_id: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current action id in context and return a token for later reset."""
    if not action_id:
        return None
    return _ACTION_ID.set(action_id)


def reset_action_id(token: Optional[contextvars.Token]) -> None:
    """Reset the action id context using the provided token (if any)."""
    if token is None:
        return
    _ACTION_ID.reset(token)


def current_action_id() -> str:
    return _ACTION_ID.get()
