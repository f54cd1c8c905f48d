from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator

from luct_reports.models import Role


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)
    full_name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    role: Role
    faculty_id: Optional[int] = None

    @field_validator("username", "full_name")
    @classmethod
    def strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return value.lower()


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int = Field(validation_alias=AliasChoices("user_id", "id"))
    username: str
    full_name: str
    email: str
    role: Role
    faculty_id: Optional[int] = None


class TokenClaims(BaseModel):
    """Identity asserted by a verified access token."""

    user_id: int = Field(validation_alias=AliasChoices("user_id", "sub"))
    username: str
    role: Role
    faculty_id: Optional[int] = None
