"""create books table

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_TRIGGER_DDL: dict[str, list[str]] = {
    "postgresql": [
        """
        CREATE OR REPLACE FUNCTION books_set_updated_at() RETURNS trigger AS $$
        BEGIN
            NEW.updated_at = now();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
        """,
        """
        CREATE TRIGGER books_set_updated_at
        BEFORE UPDATE ON books
        FOR EACH ROW EXECUTE FUNCTION books_set_updated_at()
        """,
    ],
    "sqlite": [
        """
        CREATE TRIGGER books_set_updated_at
        AFTER UPDATE ON books
        FOR EACH ROW WHEN NEW.updated_at = OLD.updated_at
        BEGIN
            UPDATE books SET updated_at = CURRENT_TIMESTAMP WHERE id = NEW.id;
        END
        """,
    ],
}

_DROP_TRIGGER_DDL: dict[str, list[str]] = {
    "postgresql": [
        "DROP TRIGGER IF EXISTS books_set_updated_at ON books",
        "DROP FUNCTION IF EXISTS books_set_updated_at()",
    ],
    "sqlite": ["DROP TRIGGER IF EXISTS books_set_updated_at"],
}


def upgrade() -> None:
    op.create_table(
        "books",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("author", sa.Text(), nullable=False),
        sa.Column("isbn", sa.Text(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("category", sa.Text(), nullable=True),
        sa.Column("original_price", sa.Numeric(10, 2), nullable=True),
        sa.Column("discount", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("cover_image", sa.Text(), nullable=True),
        sa.Column("rating", sa.Numeric(3, 2), nullable=False, server_default="0"),
        sa.Column("reviews_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_new", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("pages", sa.Integer(), nullable=True),
        sa.Column("language", sa.Text(), nullable=True),
        sa.Column("publisher", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_books_category", "books", ["category"])
    op.create_index("ix_books_created_at", "books", ["created_at"])

    # updated_at is refreshed by the database on every UPDATE
    for statement in _TRIGGER_DDL.get(op.get_context().dialect.name, []):
        op.execute(statement)


def downgrade() -> None:
    for statement in _DROP_TRIGGER_DDL.get(op.get_context().dialect.name, []):
        op.execute(statement)
    op.drop_index("ix_books_created_at", table_name="books")
    op.drop_index("ix_books_category", table_name="books")
    op.drop_table("books")
