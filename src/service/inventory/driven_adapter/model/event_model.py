from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class EventModel(Base):
    """Event document as written by the event management service."""

    __tablename__ = 'event'

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    document: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)


class LayoutModel(Base):
    __tablename__ = 'layout'

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    document: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
