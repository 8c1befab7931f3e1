from sqlalchemy import Column, Index, Integer, String

from app.db.session import Base
from app.models.mixins import ActiveFlagMixin, CreatedByMixin, TimestampMixin


class Category(CreatedByMixin, ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    category_name = Column(String, nullable=True)

    # Unique only among rows that actually carry a name
    __table_args__ = (
        Index(
            "uq_categories_category_name",
            "category_name",
            unique=True,
            postgresql_where=category_name.isnot(None),
            sqlite_where=category_name.isnot(None),
        ),
    )
