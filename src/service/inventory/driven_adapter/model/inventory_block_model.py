from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class InventoryBlockModel(Base):
    __tablename__ = 'inventory_block'
    __table_args__ = (Index('ix_inventory_block_event_id_status', 'event_id', 'status'),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True)  # UUID7 string
    event_id: Mapped[str] = mapped_column(String(64), nullable=False)
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default='active')
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # GA
    tier_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tier_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    quantity: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Reserved
    seat_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    section_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    section_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    row: Mapped[str | None] = mapped_column(String(64), nullable=True)
    seat_number: Mapped[str | None] = mapped_column(String(64), nullable=True)

    blocked_by: Mapped[str] = mapped_column(String(255), nullable=False)
    blocked_by_name: Mapped[str] = mapped_column(String(255), nullable=False)
    blocked_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    released_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    released_by_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    released_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
