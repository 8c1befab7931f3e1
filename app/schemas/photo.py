from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.common import ORMModel


class PhotoOut(ORMModel):
    id: int
    images: list[str] = []
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(default=None, serialization_alias="updatedAt")


class ImageDelete(BaseModel):
    imageUrl: str | None = None
