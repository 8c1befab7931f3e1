from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.models.category import Category
from app.models.product import Product


def clean_text(value: str | None) -> str:
    return (value or "").strip()


def newest_first(db: Session, model) -> list:
    stmt = select(model).order_by(model.created_at.desc(), model.id.desc())
    return list(db.execute(stmt).scalars().unique())


def get_by_id(db: Session, model, obj_id: int):
    return db.get(model, obj_id)


def find_category_by_name(db: Session, name: str) -> Category | None:
    return db.execute(
        select(Category).where(Category.category_name == name)
    ).scalar_one_or_none()


def resolve_category(db: Session, category_id) -> int | None:
    """Map a raw `categoryId` form value to an existing category id.

    Blank values mean "no category"; anything else must name a real row.
    """
    raw = clean_text(str(category_id)) if category_id is not None else ""
    if not raw:
        return None
    if not raw.isdigit() or db.get(Category, int(raw)) is None:
        raise ValidationError("Invalid category")
    return int(raw)


def count_products_in_category(db: Session, category_id: int) -> int:
    return db.execute(
        select(func.count(Product.id)).where(Product.category_id == category_id)
    ).scalar_one()
