from app.models.admin import Admin
from app.models.category import Category
from app.models.product import Product
from app.models.photo import Photo

__all__ = ["Admin", "Category", "Product", "Photo"]
