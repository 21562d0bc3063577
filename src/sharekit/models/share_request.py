from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from sharekit.capability.types import ShareParams, ShareUri
from sharekit.core.exceptions import MalformedPayloadError
from sharekit.core.logger import get_logger

log = get_logger(__name__)


def parse_uri(value: Any) -> Optional[ShareUri]:
    """Parse ``value`` as a URI reference; anything else (including garbage) maps to None."""
    if not isinstance(value, str):
        return None
    try:
        return ShareUri.parse(value)
    except ValueError:
        log.debug(f"Dropping unparsable uri: {value!r}")
        return None


def _optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else None


class ShareRequest(BaseModel):
    """Content handed to the platform share surface by a ``share`` action.

    This is the supported subset of ``ShareParams``. Attachments, file name
    overrides, fallback flags, the preview thumbnail and the popover origin
    are not carried; every conversion drops them and the capability applies
    its own defaults.
    """

    model_config = ConfigDict(frozen=True)

    # Freeform text. Not meant to be combined with ``uri``.
    text: Optional[str] = None
    # Share sheet title where supported.
    title: Optional[str] = None
    # Email subject, used by mail-like targets.
    subject: Optional[str] = None
    # Resource locator to share, as written. Not meant to be combined with ``text``.
    uri: Optional[ShareUri] = None

    @field_validator("uri", mode="before")
    @classmethod
    def _coerce_uri(cls, value: Any) -> Any:
        if isinstance(value, str):
            return ShareUri.parse(value)
        return value

    @field_serializer("uri")
    def _serialize_uri(self, uri: Optional[ShareUri]) -> Optional[str]:
        return str(uri) if uri is not None else None

    @classmethod
    def from_json(cls, data: Any) -> "ShareRequest":
        """Decode the ``data`` sub-map of a share action.

        Keys other than text/title/subject/uri are ignored. Non-string values
        and an unparsable uri decode as absent.

        Raises:
            MalformedPayloadError: If ``data`` is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise MalformedPayloadError(
                reason="Share action data must be a mapping",
                details={"got": type(data).__name__},
            )
        return cls(
            text=_optional_str(data, "text"),
            title=_optional_str(data, "title"),
            subject=_optional_str(data, "subject"),
            uri=parse_uri(data.get("uri")),
        )

    @classmethod
    def from_share_params(cls, params: ShareParams) -> "ShareRequest":
        return cls(
            text=params.text,
            title=params.title,
            subject=params.subject,
            uri=params.uri,
        )

    def to_share_params(self) -> ShareParams:
        return ShareParams(
            text=self.text,
            title=self.title,
            subject=self.subject,
            uri=self.uri,
        )

    def copy_with(
        self,
        *,
        text: Optional[str] = None,
        title: Optional[str] = None,
        subject: Optional[str] = None,
        uri: Optional[ShareUri] = None,
    ) -> "ShareRequest":
        return type(self)(
            text=text if text is not None else self.text,
            title=title if title is not None else self.title,
            subject=subject if subject is not None else self.subject,
            uri=uri if uri is not None else self.uri,
        )

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
