from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from app.core import config
from app.core.dependencies import get_db, get_identity, get_media_host
from app.core.errors import NotFoundError, ValidationError
from app.core.identity import Identity, require_admin
from app.core.logging_config import catalog_logger
from app.crud.catalog import get_by_id, newest_first
from app.models.photo import Photo
from app.schemas.common import envelope
from app.schemas.photo import ImageDelete, PhotoOut
from app.utils.cloudinary_utils import reference_from_url, release_urls, upload_files

router = APIRouter(prefix="/photo", tags=["Photos"])


def get_photo_or_404(db: Session, photo_id: int) -> Photo:
    photo = get_by_id(db, Photo, photo_id)
    if not photo:
        raise NotFoundError("Photo not found")
    return photo


def real_files(files: list[UploadFile] | None) -> list[UploadFile]:
    return [f for f in (files or []) if f.filename]


# =====================================================================
#                       CREATE PHOTO (upload images)
# =====================================================================
@router.post("", status_code=201)
def create_photo(
    images: list[UploadFile] | None = File(None),
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    media_host=Depends(get_media_host),
):
    admin = require_admin(identity)

    files = real_files(images)
    if not files:
        raise ValidationError("At least one image is required")

    photo = Photo(images=upload_files(media_host, files, config.PHOTO_FOLDER))
    db.add(photo)
    db.commit()
    db.refresh(photo)

    catalog_logger.info(f"PHOTO CREATE: id={photo.id} images={len(photo.images)} by={admin.id}")
    return envelope(PhotoOut.model_validate(photo).to_wire(), message="Photo created")


# =====================================================================
#                       LIST / DETAIL (public)
# =====================================================================
@router.get("")
def list_photos(db: Session = Depends(get_db)):
    photos = newest_first(db, Photo)
    return envelope([PhotoOut.model_validate(p).to_wire() for p in photos])


@router.get("/{photo_id}")
def get_photo(photo_id: int, db: Session = Depends(get_db)):
    photo = get_photo_or_404(db, photo_id)
    return envelope(PhotoOut.model_validate(photo).to_wire())


# =====================================================================
#                       REPLACE IMAGES
# =====================================================================
@router.put("/{photo_id}")
def update_photo(
    photo_id: int,
    images: list[UploadFile] | None = File(None),
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    media_host=Depends(get_media_host),
):
    admin = require_admin(identity)
    photo = get_photo_or_404(db, photo_id)

    files = real_files(images)
    replaced = []
    if files:
        replaced = list(photo.images)
        photo.images = upload_files(media_host, files, config.PHOTO_FOLDER)
        db.commit()
        release_urls(media_host, replaced, config.PHOTO_FOLDER)

    db.refresh(photo)
    catalog_logger.info(f"PHOTO UPDATE: id={photo.id} replaced={len(replaced)} by={admin.id}")
    return envelope(PhotoOut.model_validate(photo).to_wire(), message="Photo updated")


# =====================================================================
#                       DELETE PHOTO
# =====================================================================
@router.delete("/{photo_id}")
def delete_photo(
    photo_id: int,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    media_host=Depends(get_media_host),
):
    admin = require_admin(identity)
    photo = get_photo_or_404(db, photo_id)

    urls = list(photo.images)
    db.delete(photo)
    db.commit()

    release_urls(media_host, urls, config.PHOTO_FOLDER)

    catalog_logger.info(f"PHOTO DELETE: id={photo_id} by={admin.id}")
    return envelope(message="Photo deleted successfully")


# =====================================================================
#                       DELETE ONE IMAGE FROM A PHOTO
# =====================================================================
@router.delete("/{photo_id}/image")
def delete_photo_image(
    photo_id: int,
    data: ImageDelete,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    media_host=Depends(get_media_host),
):
    admin = require_admin(identity)

    image_url = (data.imageUrl or "").strip()
    if not image_url:
        raise ValidationError("Image URL is required")

    photo = get_photo_or_404(db, photo_id)
    if image_url not in photo.images:
        raise NotFoundError("Image not found in photo")

    photo.images.remove(image_url)
    media_host.destroy(reference_from_url(image_url, config.PHOTO_FOLDER))
    db.commit()
    db.refresh(photo)

    catalog_logger.info(f"PHOTO IMAGE DELETE: id={photo.id} by={admin.id}")
    return envelope(PhotoOut.model_validate(photo).to_wire(), message="Image deleted successfully")
