from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, List, Optional, Type

from sharekit.core.exceptions import ParserRegistryError
from sharekit.parsers.base import ActionParser


class ParserRegistry:
    _registry: ClassVar[Dict[str, ActionParser[Any]]] = {}

    @classmethod
    def register(cls, parser: ActionParser[Any], *, overwrite: bool = False) -> None:
        action_type = parser.action_type
        if not action_type:
            raise ParserRegistryError(f"Parser {parser!r} has an empty action_type")
        if not overwrite and action_type in cls._registry:
            existing = cls._registry[action_type]
            raise ParserRegistryError(
                f"Parser already registered for action_type={action_type!r}: {existing}"
            )
        cls._registry[action_type] = parser

    @classmethod
    def get(cls, action_type: str) -> ActionParser[Any]:
        try:
            return cls._registry[action_type]
        except KeyError as exc:
            raise ParserRegistryError(
                f"No parser registered for action_type={action_type!r}"
            ) from exc

    @classmethod
    def try_get(cls, action_type: str) -> Optional[ActionParser[Any]]:
        return cls._registry.get(action_type)

    @classmethod
    def action_types(cls) -> List[str]:
        return sorted(cls._registry)

    @classmethod
    def clear(cls) -> None:
        cls._registry.clear()


def register_parser(*, overwrite: bool = False) -> Callable[[Type[Any]], Type[Any]]:
    """Class decorator: instantiate the parser with no arguments and register it."""

    def decorator(parser_class: Type[Any]) -> Type[Any]:
        ParserRegistry.register(parser_class(), overwrite=overwrite)
        return parser_class

    return decorator
