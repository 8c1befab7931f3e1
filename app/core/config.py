import os
from dotenv import load_dotenv

load_dotenv()


def require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"{name} environment variable not found!")
    return value


# -------- DATABASE --------
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./catalog.db")

# -------- JWT --------
JWT_SECRET = require_env("JWT_SECRET")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRE_DAYS = int(os.getenv("JWT_EXPIRE_DAYS", 7))

# -------- CLOUDINARY --------
CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME")
CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY")
CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET")

PRODUCT_FOLDER = os.getenv("PRODUCT_FOLDER", "products")
PHOTO_FOLDER = os.getenv("PHOTO_FOLDER", "photo")

# -------- LOGGING --------
LOG_DIR = os.getenv("LOG_DIR", "logs")
