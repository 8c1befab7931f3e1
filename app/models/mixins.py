from sqlalchemy import Boolean, Column, DateTime, Integer, String, func


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class CreatedByMixin:
    """Snapshot of the creating admin, copied at write time (not a live join)."""

    created_by_id = Column(Integer, nullable=True, index=True)
    created_by_name = Column(String, nullable=True)
    created_by_email = Column(String, nullable=True)

    @property
    def created_by(self):
        if self.created_by_id is None:
            return None
        return {
            "id": self.created_by_id,
            "name": self.created_by_name,
            "email": self.created_by_email,
        }

    def stamp_creator(self, identity):
        self.created_by_id = identity.id
        self.created_by_name = identity.name
        self.created_by_email = identity.email.lower() if identity.email else None


class ActiveFlagMixin:
    # Advisory only; nothing filters reads on it
    is_active = Column(Boolean, default=True, nullable=False)
