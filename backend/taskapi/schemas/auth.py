"""Auth Schemas — signup/login credentials and token response.

Invariants:
    - email is a syntactically valid address, lower-cased
    - password is non-empty and at most 72 UTF-8 bytes (bcrypt input limit)
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

BCRYPT_MAX_PASSWORD_BYTES = 72


class Credentials(BaseModel):
    """Email/password pair used by both signup and login."""
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(
                f"password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes",
            )
        return v


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str
