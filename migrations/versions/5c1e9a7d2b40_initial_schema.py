"""initial schema

Revision ID: 5c1e9a7d2b40
Revises:
Create Date: 2025-08-02 10:14:07.512331

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5c1e9a7d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Create catalog, vote and score tables."""
    op.create_table(
        "company",
        sa.Column("company_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("company_name", sa.Text(), nullable=False),
        sa.Column("company_gst_number", sa.Text(), nullable=True),
        sa.Column("company_city", sa.Text(), nullable=True),
        sa.Column("company_state", sa.Text(), nullable=True),
        sa.Column("company_country", sa.Text(), nullable=True),
        sa.Column("company_pincode", sa.Text(), nullable=True),
        sa.Column("company_address", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("company_id"),
    )
    op.create_table(
        "employee",
        sa.Column("employee_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_name", sa.Text(), nullable=False),
        sa.Column("employee_email", sa.Text(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("employee_id"),
        sa.UniqueConstraint("employee_email"),
    )
    op.create_table(
        "category",
        sa.Column("category_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("category_name", sa.Text(), nullable=False),
        sa.Column("category_description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("category_id"),
        sa.UniqueConstraint("category_name"),
    )
    op.create_table(
        "subcategory",
        sa.Column("subcategory_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("subcategory_name", sa.Text(), nullable=False),
        sa.Column("subcategory_description", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["category_id"], ["category.category_id"]),
        sa.PrimaryKeyConstraint("subcategory_id"),
    )
    op.create_index("ix_subcategory_category_id", "subcategory", ["category_id"])
    op.create_table(
        "question",
        sa.Column("question_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("question_writer_id", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column("subcategory_id", sa.Integer(), nullable=True),
        sa.Column("question_type", sa.Text(), nullable=False),
        sa.Column("question_instructions", sa.Text(), nullable=True),
        sa.Column("difficulty_level", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            "question_type IN ('mcq', 'true_false')",
            name="ck_question_type",
        ),
        sa.CheckConstraint(
            "difficulty_level IS NULL OR difficulty_level IN ('easy', 'medium', 'hard')",
            name="ck_question_difficulty",
        ),
        sa.ForeignKeyConstraint(["question_writer_id"], ["employee.employee_id"]),
        sa.ForeignKeyConstraint(
            ["category_id"], ["category.category_id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(
            ["subcategory_id"], ["subcategory.subcategory_id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("question_id"),
    )
    op.create_index("ix_question_category_id", "question", ["category_id"])
    op.create_index("ix_question_subcategory_id", "question", ["subcategory_id"])
    op.create_table(
        "question_option",
        sa.Column("option_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.Column("option_text", sa.Text(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column("option_order", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["question_id"], ["question.question_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("option_id"),
    )
    op.create_index("ix_question_option_question_id", "question_option", ["question_id"])
    op.create_table(
        "question_vote",
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.Column("voter_id", sa.Integer(), nullable=False),
        sa.Column("vote_type", sa.Text(), nullable=False),
        sa.CheckConstraint(
            "vote_type IN ('upvote', 'downvote')",
            name="ck_question_vote_type",
        ),
        sa.ForeignKeyConstraint(
            ["question_id"], ["question.question_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("question_id", "voter_id"),
    )
    op.create_index("ix_question_vote_question_id", "question_vote", ["question_id"])
    op.create_table(
        "question_score",
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.Column("base_score", sa.Integer(), nullable=False, server_default="100"),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.CheckConstraint("upvotes >= 0", name="ck_question_score_upvotes"),
        sa.CheckConstraint("downvotes >= 0", name="ck_question_score_downvotes"),
        sa.ForeignKeyConstraint(
            ["question_id"], ["question.question_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("question_id"),
    )


def downgrade() -> None:
    """Drop every table created by this revision."""
    op.drop_table("question_score")
    op.drop_index("ix_question_vote_question_id", table_name="question_vote")
    op.drop_table("question_vote")
    op.drop_index("ix_question_option_question_id", table_name="question_option")
    op.drop_table("question_option")
    op.drop_index("ix_question_subcategory_id", table_name="question")
    op.drop_index("ix_question_category_id", table_name="question")
    op.drop_table("question")
    op.drop_index("ix_subcategory_category_id", table_name="subcategory")
    op.drop_table("subcategory")
    op.drop_table("category")
    op.drop_table("employee")
    op.drop_table("company")
