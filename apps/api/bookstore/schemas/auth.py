"""Authentication schemas."""

from datetime import datetime

from pydantic import Field

from bookstore.schemas.common import CamelModel


class Identity(CamelModel):
    """Decoded caller identity carried by an access token."""

    user_id: str = Field(min_length=1)
    email: str = ""
    user_name: str = ""
    user_type: str = ""
    permissions: list[str] = Field(default_factory=list)

    def claims(self) -> dict:
        return self.model_dump(by_alias=True)


class UserType(CamelModel):
    id: int
    name: str


class User(CamelModel):
    id: str
    email: str
    full_name: str
    user_type: UserType
    is_active: bool = True
    created_at: datetime
    updated_at: datetime | None = None


class LoginRequest(CamelModel):
    email: str
    password: str


class RegisterRequest(CamelModel):
    full_name: str
    email: str
    password: str
    user_type: int


class ForgotPasswordRequest(CamelModel):
    email: str


class ResetPasswordRequest(CamelModel):
    password: str
    confirm_password: str
    token: str
    email: str


class LoginResult(CamelModel):
    user: User
    access_token: str
