from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, undefer

from app.core.errors import ConflictError
from app.core.identity import Authenticated
from app.core.security import hash_password, verify_and_upgrade, verify_password
from app.models.admin import Admin


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class AdminStore:
    """Credential store for admin records.

    The password hash is a deferred column: it is only loaded when a caller
    passes ``include_password=True`` (login and password checks).
    """

    def __init__(self, db: Session):
        self.db = db

    # ---------------- LOOKUPS ----------------
    def find_by_id(self, admin_id: int, include_password: bool = False) -> Admin | None:
        stmt = select(Admin).where(Admin.id == admin_id)
        if include_password:
            stmt = stmt.options(undefer(Admin.password_hash))
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_email(self, email: str, include_password: bool = False) -> Admin | None:
        stmt = select(Admin).where(Admin.email == normalize_email(email))
        if include_password:
            stmt = stmt.options(undefer(Admin.password_hash))
        return self.db.execute(stmt).scalar_one_or_none()

    def list_all(self) -> list[Admin]:
        stmt = select(Admin).order_by(Admin.created_at.desc(), Admin.id.desc())
        return list(self.db.execute(stmt).scalars())

    def list_created_by(self, admin_id: int) -> list[Admin]:
        stmt = (
            select(Admin)
            .where(Admin.created_by_id == admin_id)
            .order_by(Admin.created_at.desc(), Admin.id.desc())
        )
        return list(self.db.execute(stmt).scalars())

    # ---------------- WRITES ----------------
    def create(
        self,
        full_name: str,
        email: str,
        password: str,
        created_by: Authenticated | None = None,
    ) -> Admin:
        email = normalize_email(email)
        if self.find_by_email(email):
            raise ConflictError("Email already registered")

        admin = Admin(
            full_name=full_name.strip(),
            email=email,
            password_hash=hash_password(password),
            is_active=True,
        )
        if created_by is not None:
            admin.stamp_creator(created_by)

        self.db.add(admin)
        self._commit("Email already registered")
        self.db.refresh(admin)
        return admin

    def update(self, admin: Admin, **fields) -> Admin:
        if fields.get("full_name") is not None:
            admin.full_name = fields["full_name"].strip()

        if fields.get("email") is not None:
            email = normalize_email(fields["email"])
            existing = self.find_by_email(email)
            if existing is not None and existing.id != admin.id:
                raise ConflictError("Email already in use")
            admin.email = email

        # Re-hash only when the secret actually changes
        if fields.get("password") is not None:
            admin.password_hash = hash_password(fields["password"])

        self._commit("Email already in use")
        self.db.refresh(admin)
        return admin

    def set_active(self, admin: Admin, active: bool) -> Admin:
        admin.is_active = active
        self.db.commit()
        self.db.refresh(admin)
        return admin

    def delete(self, admin: Admin) -> None:
        self.db.delete(admin)
        self.db.commit()

    # ---------------- CREDENTIALS ----------------
    def verify_password(self, admin: Admin, password: str) -> bool:
        return verify_password(password, admin.password_hash)

    def authenticate(self, email: str, password: str) -> Admin | None:
        """Return the admin when the email/password pair matches, else None"""
        admin = self.find_by_email(email, include_password=True)
        if admin is None:
            return None

        ok, new_hash = verify_and_upgrade(password, admin.password_hash)
        if not ok:
            return None
        if new_hash:
            admin.password_hash = new_hash
            self.db.commit()
        return admin

    def _commit(self, conflict_message: str) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(conflict_message)
