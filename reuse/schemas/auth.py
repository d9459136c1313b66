"""Auth request/response schemas - register, login, token identity."""

import string

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

from reuse.schemas.user import UserPublic

PASSWORD_SYMBOLS = "@$!%*?&"


def password_problems(password: str) -> list[str]:
    """Return every password rule the candidate violates (empty list = acceptable)."""
    problems = []
    if len(password) < 8:
        problems.append("Mínimo 8 caracteres")
    if not any(c in string.ascii_uppercase for c in password):
        problems.append("Inclua 1 letra maiúscula")
    if not any(c in string.digits for c in password):
        problems.append("Inclua 1 número")
    if not any(c in PASSWORD_SYMBOLS for c in password):
        problems.append(f"Inclua 1 caractere especial ({PASSWORD_SYMBOLS})")
    # bcrypt only considers the first 72 bytes
    if len(password.encode("utf-8")) > 72:
        problems.append("Máximo 72 bytes")
    return problems


def check_email(value: str) -> str:
    value = value.strip()
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError("E-mail inválido")
    return value


class Identity(BaseModel):
    """Authenticated caller, decoded from the bearer token (not re-read from DB)."""

    id: int
    email: str


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str
    city: str | None = None
    age: int | None = Field(default=None, strict=True)

    @field_validator("name")
    @classmethod
    def name_long_enough(cls, v: str) -> str:
        if len(v) < 2:
            raise ValueError("Nome muito curto")
        return v

    @field_validator("email")
    @classmethod
    def email_syntax(cls, v: str) -> str:
        return check_email(v)

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        problems = password_problems(v)
        if problems:
            raise ValueError("; ".join(problems))
        return v

    @field_validator("age")
    @classmethod
    def age_positive(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("Idade deve ser um inteiro positivo")
        return v


class LoginRequest(BaseModel):
    email: str
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def email_syntax(cls, v: str) -> str:
        return check_email(v)


class AuthResponse(BaseModel):
    token: str
    user: UserPublic
