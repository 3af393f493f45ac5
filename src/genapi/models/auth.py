from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr, TypeAdapter


class _AuthBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class BasicAuth(_AuthBase):
    kind: Literal["basic"] = "basic"
    username: str
    password: SecretStr


class JwtAuth(_AuthBase):
    kind: Literal["jwt"] = "jwt"
    token: SecretStr


class BearerAuth(_AuthBase):
    kind: Literal["bearer"] = "bearer"
    token: SecretStr


class OAuth2Auth(_AuthBase):
    kind: Literal["oauth2"] = "oauth2"
    token: SecretStr


class ApiKeyAuth(_AuthBase):
    kind: Literal["apikey"] = "apikey"
    key: SecretStr


class TokenAuth(_AuthBase):
    kind: Literal["token"] = "token"
    token: SecretStr


class NoAuth(_AuthBase):
    kind: Literal["none"] = "none"


AuthScheme = Annotated[
    Union[BasicAuth, JwtAuth, BearerAuth, OAuth2Auth, ApiKeyAuth, TokenAuth, NoAuth],
    Field(discriminator="kind"),
]

AuthKind = Literal["basic", "jwt", "bearer", "oauth2", "apikey", "token", "none"]

_auth_scheme_adapter: TypeAdapter[AuthScheme] = TypeAdapter(AuthScheme)


def auth_scheme_from_mapping(kind: str, **payload: Any) -> AuthScheme:
    """Build an auth scheme from its tag and credential payload.

    Examples:
        >>> auth_scheme_from_mapping("apikey", key="XYZ")
        ApiKeyAuth(kind='apikey', key=SecretStr('**********'))

    Raises:
        pydantic.ValidationError: If the tag is unknown or the payload does not
            match the shape required by the tag.
    """
    return _auth_scheme_adapter.validate_python({"kind": kind, **payload})
