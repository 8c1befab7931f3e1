import io
from urllib.parse import urlparse

import cloudinary
import cloudinary.uploader
from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from app.core import config
from app.core.errors import MediaHostError, ValidationError
from app.core.logging_config import get_logger

logger = get_logger()

ALLOWED_TYPES = {
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/heic",
    "image/heif",
    "image/webp",
}


def reference_from_url(url: str, folder: str) -> str:
    """Derive the Cloudinary public id `<folder>/<file stem>` from a delivery URL"""
    last_segment = urlparse(url).path.rstrip("/").split("/")[-1]
    stem = last_segment.split(".")[0]
    return f"{folder}/{stem}"


# =====================================================================
#                  CONVERT ANY IMAGE TO JPEG (AUTO-CONVERT)
# =====================================================================
def convert_to_jpeg(upload_file: UploadFile) -> bytes:
    content_type = (upload_file.content_type or "").lower()
    if content_type not in ALLOWED_TYPES:
        raise ValidationError(
            f"Unsupported file type {upload_file.content_type}. "
            "Allowed: JPEG, JPG, PNG, HEIC, HEIF, WEBP"
        )

    contents = upload_file.file.read()

    try:
        img = Image.open(io.BytesIO(contents)).convert("RGB")
    except (UnidentifiedImageError, OSError):
        raise ValidationError("Invalid image file")

    buffer = io.BytesIO()
    img.save(buffer, format="JPEG", quality=90)
    return buffer.getvalue()


class CloudinaryMediaHost:
    """Media host backed by Cloudinary. Built once at startup."""

    def __init__(self, cloud_name: str | None, api_key: str | None, api_secret: str | None):
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )

    @classmethod
    def from_env(cls):
        return cls(
            cloud_name=config.CLOUDINARY_CLOUD_NAME,
            api_key=config.CLOUDINARY_API_KEY,
            api_secret=config.CLOUDINARY_API_SECRET,
        )

    def upload(self, image_bytes: bytes, folder: str) -> str:
        try:
            result = cloudinary.uploader.upload(
                image_bytes,
                folder=folder,
                resource_type="image",
                format="jpg",
                quality="90",
            )
        except Exception as e:
            logger.error(f"Cloudinary upload error: {e}")
            raise MediaHostError("Cloud upload failed", error=str(e))

        return result.get("secure_url")

    def destroy(self, reference: str) -> None:
        try:
            cloudinary.uploader.destroy(reference, invalidate=True)
        except Exception as e:
            logger.error(f"Cloudinary delete error: {e}")
            raise MediaHostError("Cloud delete failed", error=str(e))


def upload_files(media_host, files: list[UploadFile], folder: str) -> list[str]:
    """Upload files one at a time; a failure aborts without undoing earlier uploads"""
    urls = []
    for file in files:
        jpeg_bytes = convert_to_jpeg(file)
        urls.append(media_host.upload(jpeg_bytes, folder))
    return urls


def release_urls(media_host, urls: list[str], folder: str) -> None:
    for url in urls:
        media_host.destroy(reference_from_url(url, folder))
