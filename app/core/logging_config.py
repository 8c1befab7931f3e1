from loguru import logger
import os

from app.core.config import LOG_DIR

# Create folder if missing
if not os.path.exists(LOG_DIR):
    os.makedirs(LOG_DIR)

# Remove default handler
logger.remove()

# General application log
logger.add(
    f"{LOG_DIR}/app.log",
    rotation="1 week",
    retention="4 weeks",
    level="INFO",
    enqueue=True,
    format="{time} | {level} | {message}"
)

# Admin activity logs (logins, registrations, activation changes)
logger.add(
    f"{LOG_DIR}/admin.log",
    rotation="1 week",
    retention="4 weeks",
    level="INFO",
    enqueue=True,
    filter=lambda record: record["extra"].get("log_type") == "admin",
    format="{time} | {level} | {message}"
)

# Catalog changes (categories, products, photos)
logger.add(
    f"{LOG_DIR}/catalog.log",
    rotation="1 week",
    retention="4 weeks",
    level="INFO",
    enqueue=True,
    filter=lambda record: record["extra"].get("log_type") == "catalog",
    format="{time} | {level} | {message}"
)

# Error logs
logger.add(
    f"{LOG_DIR}/errors.log",
    rotation="1 week",
    retention="8 weeks",
    level="ERROR",
    enqueue=True,
)

admin_logger = logger.bind(log_type="admin")
catalog_logger = logger.bind(log_type="catalog")


def get_logger():
    return logger
