"""Item request/response schemas - REST API contract (camelCase on the wire)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from reuse.schemas.user import check_url

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ItemCreate(BaseModel):
    """POST /items body. Owner always comes from the token, never from here."""

    model_config = _camel

    title: str | None = None
    type: str | None = None
    description: str | None = None
    image_url: str | None = None

    @model_validator(mode="after")
    def required_fields(self) -> "ItemCreate":
        if not self.title or not self.type:
            raise ValueError("Campos obrigatórios: title, type")
        return self


class ItemUpdate(BaseModel):
    """PUT /items/{id} body. Absent fields are untouched; null clears optional ones."""

    model_config = _camel

    title: str | None = None
    description: str | None = None
    type: str | None = None
    image_url: str | None = None
    usage_time: str | None = None
    reason: str | None = None
    open_to_trade: bool | None = Field(default=None, strict=True)
    price: float | None = Field(default=None, strict=True, allow_inf_nan=False)

    @field_validator("title")
    @classmethod
    def title_long_enough(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Título não pode ser nulo")
        if len(v) < 2:
            raise ValueError("Título muito curto")
        return v

    @field_validator("type")
    @classmethod
    def type_not_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Tipo não pode ser nulo")
        return v

    @field_validator("image_url")
    @classmethod
    def image_is_url(cls, v: str | None) -> str | None:
        return check_url(v, "URL da imagem inválida")

    @field_validator("price")
    @classmethod
    def price_non_negative(cls, v: float | None) -> float | None:
        if v is not None and v < 0:
            raise ValueError("Preço não pode ser negativo")
        return v


class OwnerSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    description: str | None = None
    type: str
    image_url: str | None = None
    usage_time: str | None = None
    reason: str | None = None
    open_to_trade: bool | None = None
    price: float | None = None
    created_at: datetime
    owner_id: int


class ItemWithOwnerResponse(ItemResponse):
    owner: OwnerSummary
