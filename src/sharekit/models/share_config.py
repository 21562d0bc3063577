from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Union

from pydantic import BaseModel, Field, HttpUrl, PositiveFloat, field_validator


class WebhookPlatformConfig(BaseModel):
    kind: Literal["webhook"] = "webhook"

    url: HttpUrl
    timeout_seconds: PositiveFloat = 10.0
    headers: Dict[str, str] = Field(default_factory=dict)


class MailtoPlatformConfig(BaseModel):
    kind: Literal["mailto"] = "mailto"

    recipients: List[str] = Field(default_factory=list)

    @field_validator("recipients")
    @classmethod
    def _validate_recipients(cls, value: List[str]) -> List[str]:
        for address in value:
            if "@" not in address:
                raise ValueError(f"recipient is not an email address: {address!r}")
        return value


PlatformConfig = Annotated[
    Union[WebhookPlatformConfig, MailtoPlatformConfig],
    Field(discriminator="kind"),
]


class ShareConfig(BaseModel):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Platform that actually performs the share.
    platform: PlatformConfig
