from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.mixins import ActiveFlagMixin, CreatedByMixin, TimestampMixin


class Product(CreatedByMixin, ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    product_image = Column(String, nullable=True)
    product_name = Column(String, nullable=False, default="")
    description = Column(String, nullable=False, default="")

    # Non-owning reference, checked at write time
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)

    category = relationship("Category", lazy="joined")
