from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.dependencies import get_db, get_identity
from app.core.errors import UnauthorizedError, ValidationError
from app.core.identity import Authenticated, Identity
from app.core.jwt import create_access_token
from app.core.logging_config import admin_logger
from app.crud.admin_store import AdminStore
from app.schemas.admin import AdminCreate, AdminLogin, AdminOut

router = APIRouter(prefix="/admin", tags=["Authentication"])


# =====================================================================
#                           ADMIN LOGIN
# =====================================================================
@router.post("/login")
def admin_login(data: AdminLogin, db: Session = Depends(get_db)):
    if not data.email.strip() or not data.password:
        raise ValidationError("Please provide email and password")

    admin = AdminStore(db).authenticate(data.email, data.password)
    if admin is None:
        admin_logger.info(f"LOGIN FAILED: {data.email}")
        raise UnauthorizedError("Invalid credentials")

    if not admin.is_active:
        admin_logger.info(f"LOGIN REFUSED (inactive): admin={admin.id}")
        raise UnauthorizedError("Admin account is inactive")

    admin_logger.info(f"LOGIN: admin={admin.id}")

    return {
        "success": True,
        "message": "Login successful",
        "token": create_access_token(admin.id),
        "admin": AdminOut.model_validate(admin).to_wire(),
    }


# =====================================================================
#                           ADMIN REGISTER
# =====================================================================
@router.post("/register", status_code=201)
def admin_register(
    data: AdminCreate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    # Anonymous callers bootstrap a top-level admin with no creator
    creator = identity if isinstance(identity, Authenticated) else None

    admin = AdminStore(db).create(
        full_name=data.full_name,
        email=data.email,
        password=data.password,
        created_by=creator,
    )

    admin_logger.info(
        f"REGISTER: admin={admin.id} by={creator.id if creator else 'bootstrap'}"
    )

    return {
        "success": True,
        "message": "Admin registered successfully",
        "token": create_access_token(admin.id),
        "admin": AdminOut.model_validate(admin).to_wire(),
    }
