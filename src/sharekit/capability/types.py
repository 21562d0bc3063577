from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Dict, List, Optional, Union
from urllib.parse import urlsplit

from pydantic import AnyUrl, TypeAdapter

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

# Whitespace, controls, characters outside RFC 3986 and stray percent signs.
_NOT_URI = re.compile(r"[\s\x00-\x1f\x7f<>\"{}|\\^`]|%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True)
class ShareUri:
    """A URI reference, kept exactly as written.

    Relative references are allowed. Absolute ones must also be accepted by
    pydantic's URL parser; its normalized form is only used as a check.
    """

    value: str

    @classmethod
    def parse(cls, value: str) -> "ShareUri":
        """Raise ValueError if ``value`` cannot be a URI reference."""
        if _NOT_URI.search(value):
            raise ValueError(f"invalid characters in uri: {value!r}")
        parts = urlsplit(value)
        if parts.scheme:
            _URL_ADAPTER.validate_python(value)
        else:
            parts.port  # raises ValueError for a malformed port
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ShareFile:
    """A file handed to the share surface, backed by a path or by in-memory bytes."""

    path: Optional[Union[str, Path]] = None
    data: Optional[bytes] = None
    mime_type: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.path is None and self.data is None:
            raise ValueError("ShareFile requires either path or data")

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        if self.path is not None:
            return Path(self.path).name
        return "file"


@dataclass(frozen=True)
class Rect:
    """Global origin rect the share sheet pops over from (iPad and macOS only)."""

    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class ShareParams:
    """Full parameter surface of the share capability.

    ``text`` and ``uri`` are mutually exclusive, as are ``uri`` and ``files``.
    The facade checks this at call time, not at construction.
    """

    text: Optional[str] = None
    title: Optional[str] = None
    subject: Optional[str] = None
    preview_thumbnail: Optional[ShareFile] = None
    share_position_origin: Optional[Rect] = None
    uri: Optional[ShareUri] = None
    files: Optional[List[ShareFile]] = None
    file_name_overrides: Optional[List[str]] = None
    download_fallback_enabled: bool = True
    mail_to_fallback_enabled: bool = True

    def copy_with(self, **overrides: Any) -> "ShareParams":
        """Return a copy where every non-None override replaces the matching field."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown ShareParams field(s): {sorted(unknown)}")
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view of the populated fields."""
        out: Dict[str, Any] = {}
        for key in ("text", "title", "subject"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        if self.uri is not None:
            out["uri"] = str(self.uri)
        if self.files:
            out["files"] = [f.display_name for f in self.files]
        if self.file_name_overrides:
            out["file_name_overrides"] = list(self.file_name_overrides)
        return out


class ShareResultStatus(str, Enum):
    SUCCESS = "success"      # User picked a target
    DISMISSED = "dismissed"  # User closed the share surface
    UNAVAILABLE = "unavailable"  # Platform cannot report the outcome


@dataclass(frozen=True)
class ShareResult:
    """Completion signal of a share call.

    ``raw`` is platform specific: the chosen target, the delivery url, or empty.
    """

    raw: str
    status: ShareResultStatus

    unavailable: ClassVar["ShareResult"]

    def to_dict(self) -> Dict[str, Any]:
        return {"raw": self.raw, "status": self.status.value}


ShareResult.unavailable = ShareResult(raw="", status=ShareResultStatus.UNAVAILABLE)
