"""Initial schema - roles, users, taxonomy terms, content and term meta.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    role = op.create_table(
        "role",
        sa.Column("slug", sa.String(64), primary_key=True),
        sa.Column("label", sa.String(255), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.bulk_insert(
        role,
        [
            {"slug": "administrator", "label": "Administrator", "position": 0},
            {"slug": "editor", "label": "Editor", "position": 1},
            {"slug": "author", "label": "Author", "position": 2},
            {"slug": "contributor", "label": "Contributor", "position": 3},
            {"slug": "subscriber", "label": "Subscriber", "position": 4},
            {"slug": "shop_manager", "label": "Shop Manager", "position": 5},
        ],
    )

    op.create_table(
        "app_user",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("login", sa.String(60), nullable=False),
        sa.Column("display_name", sa.String(250), nullable=False, server_default=""),
        sa.Column("email", sa.String(100), nullable=False, server_default=""),
        # Plain slug, not a foreign key to role.
        sa.Column("role", sa.String(64), nullable=False),
    )
    op.create_index("ix_app_user_login", "app_user", ["login"], unique=True)
    op.create_index("ix_app_user_display_name", "app_user", ["display_name"])

    op.create_table(
        "taxonomy_term",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("taxonomy", sa.String(32), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
    )
    op.create_index(
        "ix_taxonomy_term_taxonomy_slug", "taxonomy_term", ["taxonomy", "slug"], unique=True
    )

    op.create_table(
        "content_item",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("content_type", sa.String(20), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False, server_default=""),
        sa.Column("status", sa.String(20), nullable=False, server_default="publish"),
    )
    op.create_index(
        "ix_content_item_type_status", "content_item", ["content_type", "status"]
    )

    op.create_table(
        "content_term",
        sa.Column(
            "content_id",
            sa.BigInteger(),
            sa.ForeignKey("content_item.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "term_id",
            sa.BigInteger(),
            sa.ForeignKey("taxonomy_term.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    op.create_index("ix_content_term_term_id", "content_term", ["term_id"])

    op.create_table(
        "term_meta",
        sa.Column(
            "term_id",
            sa.BigInteger(),
            sa.ForeignKey("taxonomy_term.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("meta_key", sa.String(255), primary_key=True),
        sa.Column("meta_value", JSONB(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("term_meta")
    op.drop_table("content_term")
    op.drop_table("content_item")
    op.drop_table("taxonomy_term")
    op.drop_table("app_user")
    op.drop_table("role")
