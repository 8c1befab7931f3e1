from sqlalchemy import JSON, Column, Integer
from sqlalchemy.ext.mutable import MutableList

from app.db.session import Base
from app.models.mixins import TimestampMixin


class Photo(TimestampMixin, Base):
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, index=True)

    # Ordered media URLs; each one is owned by this photo only
    images = Column(MutableList.as_mutable(JSON), nullable=False, default=list)
