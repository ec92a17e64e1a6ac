"""Auth API schemas."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from condo.schemas.account import AccountResponse
from condo.schemas.condominium import CondominiumResponse
from condo.shared.utils.validators import validate_password_strength


class RegisterRequest(BaseModel):
    """Request body for public registration. Always creates a USER account."""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        return validate_password_strength(v)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class SelectCondominiumRequest(BaseModel):
    condominium_id: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Access + refresh JWT pair."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class RegisterResponse(TokenResponse):
    user: AccountResponse


class LoginResponse(TokenResponse):
    user: AccountResponse
    condominiums: list[CondominiumResponse]


class MeResponse(AccountResponse):
    """Current account plus the condominium selected in the access token, if any."""

    condominium_id: str | None = None
