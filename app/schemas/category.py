from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.common import CreatedByOut, ORMModel


class CategoryIn(BaseModel):
    category_name: str | None = None


class CategoryOut(ORMModel):
    id: int
    category_name: str | None
    is_active: bool = Field(serialization_alias="isActive")
    created_by: CreatedByOut | None = Field(default=None, serialization_alias="createdBy")
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(default=None, serialization_alias="updatedAt")


class CategoryRef(ORMModel):
    id: int
    category_name: str | None
