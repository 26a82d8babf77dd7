"""SQLAlchemy models for the two-level question taxonomy."""
from sqlalchemy import ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from question_bank.db.session import Base


class Category(Base):
    """Top-level grouping for questions."""

    __tablename__ = "category"

    category_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    category_description: Mapped[str | None] = mapped_column(Text, nullable=True)

    subcategories: Mapped[list["Subcategory"]] = relationship(back_populates="category")


class Subcategory(Base):
    """Second-level grouping nested under a category."""

    __tablename__ = "subcategory"
    __table_args__ = (Index("ix_subcategory_category_id", "category_id"),)

    subcategory_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("category.category_id"),
        nullable=False,
    )
    subcategory_name: Mapped[str] = mapped_column(Text, nullable=False)
    subcategory_description: Mapped[str | None] = mapped_column(Text, nullable=True)

    category: Mapped[Category] = relationship(back_populates="subcategories")
