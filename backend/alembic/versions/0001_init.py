"""init ranking, elements and admins

Revision ID: 0001_init
Revises: 
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    # ranking
    op.create_table(
        "ranking",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.Text, nullable=False),
        sa.Column("score", sa.Integer, nullable=False, server_default="0"),
        sa.Column("level", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("level <> 'TODOS'", name="ck_ranking_level_not_sentinel"),
    )
    op.create_index("ix_ranking_score", "ranking", ["score"])
    op.create_index("ix_ranking_level_score", "ranking", ["level", "score"])

    # elements
    op.create_table(
        "elements",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("symbol", sa.Text, nullable=False, unique=True),
        sa.Column("level", sa.Integer, nullable=False, server_default="1"),
        sa.Column("hints", sa.JSON, nullable=False),
        sa.Column("image_url", sa.Text, nullable=True),
        sa.Column("distribution_image_url", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("level >= 1", name="ck_elements_level"),
    )
    op.create_index("ix_elements_level_name", "elements", ["level", "name"])

    # admins
    op.create_table(
        "admins",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.Text, nullable=False, unique=True),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
    )


def downgrade():
    op.drop_table("admins")
    op.drop_index("ix_elements_level_name", table_name="elements")
    op.drop_table("elements")
    op.drop_index("ix_ranking_level_score", table_name="ranking")
    op.drop_index("ix_ranking_score", table_name="ranking")
    op.drop_table("ranking")
