from pydantic import BaseModel, EmailStr, field_validator, ConfigDict
from datetime import datetime

from preppulse.core.constants import RoleEnum

class UserBase(BaseModel):
    """Base user schema with common fields."""
    name: str
    email: EmailStr

class UserCreate(UserBase):
    """Schema for signing up, includes password."""
    password: str

    @field_validator("name")
    def name_not_empty(cls, v):
        if not v or not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @field_validator("email")
    def normalize_email(cls, v):
        return v.lower()

    @field_validator("password")
    def validate_password(cls, v):
        if not v or not v.strip():
            raise ValueError("Password cannot be empty or contain only whitespace.")
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters long.")
        return v

class User(UserBase):
    """Main user schema for reading user data."""
    id: int
    role: RoleEnum
    created_at: datetime
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

class UserRoleUpdate(BaseModel):
    """Schema for changing a user's role."""
    role: RoleEnum

    model_config = ConfigDict(
        use_enum_values=True,
        json_schema_extra={
            "example": {
                "role": "admin"
            }
        }
    )
