"""Create admins, categories, products and photos

Revision ID: 3c1f9a7d2b10
Revises:
Create Date: 2026-10-19 10:04:12.118406

"""
from alembic import op
import sqlalchemy as sa


revision = '3c1f9a7d2b10'
down_revision = None
branch_labels = None
depends_on = None


def _stamp_columns():
    return [
        sa.Column("created_by_id", sa.Integer(), nullable=True),
        sa.Column("created_by_name", sa.String(), nullable=True),
        sa.Column("created_by_email", sa.String(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    ]


def _timestamp_columns():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade():
    op.create_table(
        "admins",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("full_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        *_stamp_columns(),
        *_timestamp_columns(),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_admins_id", "admins", ["id"])
    op.create_index("ix_admins_email", "admins", ["email"], unique=True)
    op.create_index("ix_admins_created_by_id", "admins", ["created_by_id"])

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("category_name", sa.String(), nullable=True),
        *_stamp_columns(),
        *_timestamp_columns(),
    )
    op.create_index("ix_categories_id", "categories", ["id"])
    op.create_index("ix_categories_created_by_id", "categories", ["created_by_id"])

    # Unique only where a name is present
    op.create_index(
        "uq_categories_category_name",
        "categories",
        ["category_name"],
        unique=True,
        postgresql_where=sa.text("category_name IS NOT NULL"),
        sqlite_where=sa.text("category_name IS NOT NULL"),
    )

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("product_image", sa.String(), nullable=True),
        sa.Column("product_name", sa.String(), nullable=False, server_default=""),
        sa.Column("description", sa.String(), nullable=False, server_default=""),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=True),
        *_stamp_columns(),
        *_timestamp_columns(),
    )
    op.create_index("ix_products_id", "products", ["id"])
    op.create_index("ix_products_category_id", "products", ["category_id"])
    op.create_index("ix_products_created_by_id", "products", ["created_by_id"])

    op.create_table(
        "photos",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("images", sa.JSON(), nullable=False),
        *_timestamp_columns(),
    )
    op.create_index("ix_photos_id", "photos", ["id"])


def downgrade():
    op.drop_table("photos")
    op.drop_table("products")
    op.drop_index("uq_categories_category_name", table_name="categories")
    op.drop_table("categories")
    op.drop_table("admins")
