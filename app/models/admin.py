from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import deferred

from app.db.session import Base
from app.models.mixins import ActiveFlagMixin, CreatedByMixin, TimestampMixin


class Admin(CreatedByMixin, ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "admins"
    # Never hand a deleted admin's id to a new row; live tokens carry that id
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)

    # Not loaded unless asked for (login / password checks)
    password_hash = deferred(Column(String, nullable=False))
