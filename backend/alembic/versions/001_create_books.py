"""Create books table.

Revision ID: 001_create_books
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001_create_books"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "books",
        sa.Column("isbn", sa.String(32), primary_key=True),
        sa.Column("amazon_url", sa.Text, nullable=True),
        sa.Column("author", sa.Text, nullable=True),
        sa.Column("language", sa.Text, nullable=True),
        sa.Column("pages", sa.Integer, nullable=True),
        sa.Column("publisher", sa.Text, nullable=True),
        sa.Column("title", sa.Text, nullable=True),
        sa.Column("year", sa.Integer, nullable=True),
    )
    op.create_index("ix_books_title", "books", ["title"])


def downgrade() -> None:
    op.drop_index("ix_books_title", table_name="books")
    op.drop_table("books")
