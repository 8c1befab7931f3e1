from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.dependencies import get_db, get_identity
from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.core.identity import Identity, require_admin
from app.core.logging_config import catalog_logger
from app.crud.catalog import (
    clean_text,
    count_products_in_category,
    find_category_by_name,
    get_by_id,
    newest_first,
)
from app.models.category import Category
from app.schemas.category import CategoryIn, CategoryOut
from app.schemas.common import envelope

router = APIRouter(prefix="/category", tags=["Categories"])


def get_category_or_404(db: Session, category_id: int) -> Category:
    category = get_by_id(db, Category, category_id)
    if not category:
        raise NotFoundError("Category not found")
    return category


def commit_unique_name(db: Session):
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Category already exists")


# =====================================================================
# CREATE CATEGORY
# =====================================================================
@router.post("", status_code=201)
def create_category(
    data: CategoryIn,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    admin = require_admin(identity)

    name = clean_text(data.category_name)
    if not name:
        raise ValidationError("Category_name is required")

    if find_category_by_name(db, name):
        raise ConflictError("Category already exists")

    category = Category(category_name=name, is_active=True)
    category.stamp_creator(admin)

    db.add(category)
    commit_unique_name(db)
    db.refresh(category)

    catalog_logger.info(f"CATEGORY CREATE: id={category.id} by={admin.id}")
    return envelope(CategoryOut.model_validate(category).to_wire(), message="Category created")


# =====================================================================
# LIST / DETAIL (public)
# =====================================================================
@router.get("")
def list_categories(db: Session = Depends(get_db)):
    categories = newest_first(db, Category)
    return envelope([CategoryOut.model_validate(c).to_wire() for c in categories])


@router.get("/{category_id}")
def get_category(category_id: int, db: Session = Depends(get_db)):
    category = get_category_or_404(db, category_id)
    return envelope(CategoryOut.model_validate(category).to_wire())


# =====================================================================
# UPDATE CATEGORY
# =====================================================================
@router.put("/{category_id}")
def update_category(
    category_id: int,
    data: CategoryIn,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    admin = require_admin(identity)
    category = get_category_or_404(db, category_id)

    if data.category_name is not None:
        name = clean_text(data.category_name)
        if not name:
            raise ValidationError("Category_name is required")

        existing = find_category_by_name(db, name)
        if existing is not None and existing.id != category.id:
            raise ConflictError("Category already exists")
        category.category_name = name

    commit_unique_name(db)
    db.refresh(category)

    catalog_logger.info(f"CATEGORY UPDATE: id={category.id} by={admin.id}")
    return envelope(CategoryOut.model_validate(category).to_wire(), message="Category updated")


# =====================================================================
# DELETE CATEGORY (refused while products still point at it)
# =====================================================================
@router.delete("/{category_id}")
def delete_category(
    category_id: int,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    admin = require_admin(identity)
    category = get_category_or_404(db, category_id)

    in_use = count_products_in_category(db, category.id)
    if in_use:
        raise ValidationError(f"Category is used by {in_use} product(s)")

    snapshot = CategoryOut.model_validate(category).to_wire()
    db.delete(category)
    db.commit()

    catalog_logger.info(f"CATEGORY DELETE: id={category_id} by={admin.id}")
    return envelope(snapshot, message="Category deleted")
