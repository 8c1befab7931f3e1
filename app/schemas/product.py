from datetime import datetime

from pydantic import Field

from app.schemas.category import CategoryRef
from app.schemas.common import CreatedByOut, ORMModel


class ProductOut(ORMModel):
    id: int
    product_image: str | None = Field(default=None, serialization_alias="productImage")
    product_name: str = Field(serialization_alias="productName")
    description: str
    category_id: int | None = Field(default=None, serialization_alias="categoryId")
    category: CategoryRef | None = None
    is_active: bool = Field(serialization_alias="isActive")
    created_by: CreatedByOut | None = Field(default=None, serialization_alias="createdBy")
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(default=None, serialization_alias="updatedAt")
