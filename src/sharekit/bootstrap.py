from __future__ import annotations

import importlib
import sys
from typing import Iterable


BUILTIN_PARSER_MODULES: tuple[str, ...] = (
    "sharekit.parsers.share",
)


_LOADED = False


def load_builtin_parsers(*, reload: bool = False, modules: Iterable[str] = BUILTIN_PARSER_MODULES) -> None:
    """Import built-in parser modules so their decorators register them.

    In production, call with reload=False (default) so imports are cheap.
    In tests, call with reload=True to clear the registry and re-run decorators.
    """

    global _LOADED

    if _LOADED and not reload:
        return

    if reload:
        from sharekit.parsers.registry import ParserRegistry

        ParserRegistry.clear()

    for module_name in modules:
        if reload:
            sys.modules.pop(module_name, None)
        importlib.import_module(module_name)

    _LOADED = True
