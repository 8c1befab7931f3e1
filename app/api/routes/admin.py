from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.dependencies import get_db, get_identity
from app.core.errors import NotFoundError
from app.core.identity import Identity, require_admin
from app.core.logging_config import admin_logger
from app.crud.admin_store import AdminStore
from app.schemas.admin import AdminOut, AdminUpdate
from app.schemas.common import envelope

router = APIRouter(prefix="/admin", tags=["Admin Management"])


def get_admin_or_404(store: AdminStore, admin_id: int):
    admin = store.find_by_id(admin_id)
    if not admin:
        raise NotFoundError("Admin not found")
    return admin


# ==================================================
# GET ALL ADMINS
# ==================================================
@router.get("/all")
def get_all_admins(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    require_admin(identity)
    admins = AdminStore(db).list_all()
    return envelope([AdminOut.model_validate(a).to_wire() for a in admins])


# ==================================================
# ADMINS CREATED BY THE CALLER
# ==================================================
@router.get("/created-by/me")
def get_admins_created_by_me(
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    me = require_admin(identity)
    admins = AdminStore(db).list_created_by(me.id)
    return envelope([AdminOut.model_validate(a).to_wire() for a in admins])


@router.get("/{admin_id}")
def get_admin(
    admin_id: int,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    require_admin(identity)
    admin = get_admin_or_404(AdminStore(db), admin_id)
    return envelope(AdminOut.model_validate(admin).to_wire())


@router.put("/{admin_id}")
def update_admin(
    admin_id: int,
    data: AdminUpdate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    me = require_admin(identity)
    store = AdminStore(db)
    admin = get_admin_or_404(store, admin_id)

    admin = store.update(
        admin,
        full_name=data.full_name,
        email=data.email,
        password=data.password,
    )
    admin_logger.info(f"UPDATE: admin={admin.id} by={me.id}")

    return envelope(AdminOut.model_validate(admin).to_wire(), message="Admin updated successfully")


@router.delete("/{admin_id}")
def delete_admin(
    admin_id: int,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    me = require_admin(identity)
    store = AdminStore(db)
    admin = get_admin_or_404(store, admin_id)

    snapshot = AdminOut.model_validate(admin).to_wire()
    store.delete(admin)
    admin_logger.info(f"DELETE: admin={admin_id} by={me.id}")

    return envelope(snapshot, message="Admin deleted successfully")


# ==================================================
# ACTIVATION TOGGLES
# ==================================================
@router.put("/{admin_id}/activate")
def activate_admin(
    admin_id: int,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    me = require_admin(identity)
    store = AdminStore(db)
    admin = store.set_active(get_admin_or_404(store, admin_id), True)
    admin_logger.info(f"ACTIVATE: admin={admin_id} by={me.id}")
    return envelope(AdminOut.model_validate(admin).to_wire(), message="Admin activated successfully")


@router.put("/{admin_id}/deactivate")
def deactivate_admin(
    admin_id: int,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    me = require_admin(identity)
    store = AdminStore(db)
    admin = store.set_active(get_admin_or_404(store, admin_id), False)
    admin_logger.info(f"DEACTIVATE: admin={admin_id} by={me.id}")
    return envelope(AdminOut.model_validate(admin).to_wire(), message="Admin deactivated successfully")
