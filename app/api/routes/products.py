from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from app.core import config
from app.core.dependencies import get_db, get_identity, get_media_host
from app.core.errors import NotFoundError, ValidationError
from app.core.identity import Identity, require_admin
from app.core.logging_config import catalog_logger
from app.crud.catalog import clean_text, get_by_id, newest_first, resolve_category
from app.models.product import Product
from app.schemas.common import envelope
from app.schemas.product import ProductOut
from app.utils.cloudinary_utils import release_urls, upload_files

router = APIRouter(prefix="/product", tags=["Products"])


def get_product_or_404(db: Session, product_id: int) -> Product:
    product = get_by_id(db, Product, product_id)
    if not product:
        raise NotFoundError("Product not found")
    return product


# =====================================================================
# CREATE PRODUCT
# =====================================================================
@router.post("", status_code=201)
def create_product(
    productName: str | None = Form(None),
    description: str | None = Form(None),
    categoryId: str | None = Form(None),
    productImage: UploadFile | None = File(None),
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    media_host=Depends(get_media_host),
):
    admin = require_admin(identity)

    name = clean_text(productName)
    if not name:
        raise ValidationError("productName is required")

    category_id = resolve_category(db, categoryId)

    image_url = None
    if productImage is not None and productImage.filename:
        image_url = upload_files(media_host, [productImage], config.PRODUCT_FOLDER)[0]

    product = Product(
        product_image=image_url,
        product_name=name,
        description=clean_text(description),
        category_id=category_id,
        is_active=True,
    )
    product.stamp_creator(admin)

    db.add(product)
    db.commit()
    db.refresh(product)

    catalog_logger.info(f"PRODUCT CREATE: id={product.id} by={admin.id}")
    return envelope(ProductOut.model_validate(product).to_wire(), message="Product created")


# =====================================================================
# LIST / DETAIL (public)
# =====================================================================
@router.get("")
def list_products(db: Session = Depends(get_db)):
    products = newest_first(db, Product)
    return envelope([ProductOut.model_validate(p).to_wire() for p in products])


@router.get("/{product_id}")
def get_product(product_id: int, db: Session = Depends(get_db)):
    product = get_product_or_404(db, product_id)
    return envelope(ProductOut.model_validate(product).to_wire())


# =====================================================================
# UPDATE PRODUCT
# =====================================================================
@router.put("/{product_id}")
def update_product(
    product_id: int,
    productName: str | None = Form(None),
    description: str | None = Form(None),
    categoryId: str | None = Form(None),
    productImage: UploadFile | None = File(None),
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    media_host=Depends(get_media_host),
):
    admin = require_admin(identity)
    product = get_product_or_404(db, product_id)

    if categoryId is not None and clean_text(categoryId):
        product.category_id = resolve_category(db, categoryId)

    if productName is not None:
        name = clean_text(productName)
        if not name:
            raise ValidationError("productName cannot be empty")
        product.product_name = name

    if description is not None:
        product.description = clean_text(description)

    replaced = None
    if productImage is not None and productImage.filename:
        replaced = product.product_image
        product.product_image = upload_files(media_host, [productImage], config.PRODUCT_FOLDER)[0]

    db.commit()

    if replaced:
        release_urls(media_host, [replaced], config.PRODUCT_FOLDER)

    db.refresh(product)
    catalog_logger.info(f"PRODUCT UPDATE: id={product.id} by={admin.id}")
    return envelope(ProductOut.model_validate(product).to_wire(), message="Product updated")


# =====================================================================
# DELETE PRODUCT
# =====================================================================
@router.delete("/{product_id}")
def delete_product(
    product_id: int,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
    media_host=Depends(get_media_host),
):
    admin = require_admin(identity)
    product = get_product_or_404(db, product_id)

    snapshot = ProductOut.model_validate(product).to_wire()
    image_url = product.product_image

    db.delete(product)
    db.commit()

    if image_url:
        release_urls(media_host, [image_url], config.PRODUCT_FOLDER)

    catalog_logger.info(f"PRODUCT DELETE: id={product_id} by={admin.id}")
    return envelope(snapshot, message="Product deleted")
