"""User request/response schemas - public projection and profile update."""

from datetime import datetime

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

_url_adapter = TypeAdapter(AnyUrl)


def check_url(value: str | None, message: str) -> str | None:
    """Reject malformed URLs but keep the client's string as-is."""
    if value is None:
        return value
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError(message)
    return value


class UserPublic(BaseModel):
    """User projection returned to clients. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    email: str
    city: str | None = None
    age: int | None = None
    level: int


class UserProfile(UserPublic):
    created_at: datetime


class ProfileUpdate(BaseModel):
    """PATCH /me body. Absent fields are untouched; null clears city/age."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    city: str | None = None
    age: int | None = Field(default=None, strict=True)
    # Accepted for client compatibility; there is no column to store it.
    avatar_url: str | None = None

    @field_validator("name")
    @classmethod
    def name_long_enough(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Nome não pode ser nulo")
        if len(v) < 2:
            raise ValueError("Nome muito curto")
        return v

    @field_validator("age")
    @classmethod
    def age_positive(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("Idade deve ser um inteiro positivo")
        return v

    @field_validator("avatar_url")
    @classmethod
    def avatar_is_url(cls, v: str | None) -> str | None:
        return check_url(v, "URL do avatar inválida")
