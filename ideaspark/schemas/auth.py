"""
Pydantic schemas for authentication endpoints.

JSON keys are camelCase to match the browser client.
"""
from typing import Optional
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, EmailStr, Field, field_validator


class SignupRequest(BaseModel):
    """Request schema for user signup."""
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")
    full_name: Optional[str] = Field(default=None, alias="fullName", max_length=200, description="Display name (optional)")

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        """Validate password length in bytes (bcrypt limit is 72 bytes)."""
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password must be 72 bytes or fewer")
        return v

    @field_validator("full_name")
    @classmethod
    def blank_name_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "email": "jane.doe@example.com",
                "password": "SecurePass123",
                "fullName": "Jane Doe"
            }
        }


class SigninRequest(BaseModel):
    """
    Request schema for user sign-in.

    The email is a plain string so a malformed address fails like any other
    unknown account, with "Invalid credentials".
    """
    email: str = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize like EmailStr does at signup; leave invalid addresses as typed."""
        try:
            return validate_email(v, check_deliverability=False).normalized
        except EmailNotValidError:
            return v.strip()

    class Config:
        json_schema_extra = {
            "example": {
                "email": "jane.doe@example.com",
                "password": "SecurePass123"
            }
        }


class UserOut(BaseModel):
    """Public user profile."""
    id: int
    email: str
    full_name: Optional[str] = Field(default=None, alias="fullName")

    class Config:
        populate_by_name = True


class AuthResponse(BaseModel):
    user: UserOut
    token: str


class MessageResponse(BaseModel):
    message: str
