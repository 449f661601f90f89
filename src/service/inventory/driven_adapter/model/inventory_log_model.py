from datetime import datetime

from sqlalchemy import JSON, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class InventoryLogModel(Base):
    """Append-only. Rows are inserted by the command repo and never updated."""

    __tablename__ = 'inventory_log'
    __table_args__ = (
        Index('ix_inventory_log_event_id_performed_at', 'event_id', 'performed_at'),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)  # UUID7 string
    event_id: Mapped[str] = mapped_column(String(64), nullable=False)
    action: Mapped[str] = mapped_column(String(32), nullable=False)
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    quantity_change: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    tier_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tier_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    seat_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    section_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    section_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    previous_value: Mapped[int | None] = mapped_column(Integer, nullable=True)
    new_value: Mapped[int | None] = mapped_column(Integer, nullable=True)

    performed_by: Mapped[str] = mapped_column(String(255), nullable=False)
    performed_by_name: Mapped[str] = mapped_column(String(255), nullable=False)
    performed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
