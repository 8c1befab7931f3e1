from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.schemas.common import CreatedByOut, ORMModel


class AdminCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(alias="fullName")
    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator("full_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Full Name must be at least 2 characters long")
        return v


class AdminUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    full_name: str | None = Field(default=None, alias="fullName")
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=6)

    @field_validator("full_name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Full Name must be at least 2 characters long")
        return v


class AdminLogin(BaseModel):
    email: str
    password: str


class AdminOut(ORMModel):
    id: int
    full_name: str = Field(serialization_alias="fullName")
    email: str
    is_active: bool = Field(serialization_alias="isActive")
    created_by: CreatedByOut | None = Field(default=None, serialization_alias="createdBy")
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(default=None, serialization_alias="updatedAt")
