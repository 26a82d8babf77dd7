"""SQLAlchemy model for client companies."""
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from question_bank.db.session import Base
from question_bank.db.time import utcnow


class Company(Base):
    """Company that commissions question sets."""

    __tablename__ = "company"

    company_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_name: Mapped[str] = mapped_column(Text, nullable=False)
    company_gst_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    company_city: Mapped[str | None] = mapped_column(Text, nullable=True)
    company_state: Mapped[str | None] = mapped_column(Text, nullable=True)
    company_country: Mapped[str | None] = mapped_column(Text, nullable=True)
    company_pincode: Mapped[str | None] = mapped_column(Text, nullable=True)
    company_address: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Soft delete flag; deleted companies stay for historical references.
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
    )
