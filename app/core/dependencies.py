from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.core.identity import ANONYMOUS, Authenticated, Identity
from app.core.jwt import decode_access_token
from app.crud.admin_store import AdminStore

# Missing / non-bearer headers yield None instead of a 403
security = HTTPBearer(auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_media_host(request: Request):
    return request.app.state.media_host


def get_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> Identity:
    """Best-effort identity attach.

    Never rejects: a missing, malformed, tampered or expired token, or a token
    whose admin no longer exists, all resolve to ANONYMOUS. The admin's
    ``is_active`` flag is not consulted here.
    """
    identity: Identity = ANONYMOUS

    if credentials is not None and credentials.credentials:
        admin_id = decode_access_token(credentials.credentials)
        if admin_id is not None:
            admin = AdminStore(db).find_by_id(admin_id)
            if admin is not None:
                identity = Authenticated(
                    id=admin.id,
                    name=admin.full_name,
                    email=admin.email,
                )

    request.state.identity = identity
    return identity
