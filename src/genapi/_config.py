from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ._utils.constants import AcceptType, ContentType
from .models.auth import AuthScheme, NoAuth


class NegotiationDefaults(BaseModel):
    """Client-level content negotiation values.

    When present they take precedence over the per-call content type and
    accept values.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
    )

    content_type: ContentType = Field(default="application/json", alias="Content-Type")
    accept: AcceptType = Field(default="application/json", alias="Accept")

    def as_headers(self) -> dict[str, str]:
        return {"Content-Type": self.content_type, "Accept": self.accept}


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(min_length=1)
    auth: AuthScheme = Field(default_factory=NoAuth)
    defaults: Optional[NegotiationDefaults] = None
