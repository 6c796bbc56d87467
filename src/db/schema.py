"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    players: Mapped[list[str]] = mapped_column(JSON, default=list)
    rounds: Mapped[list[dict[str, str]]] = mapped_column(JSON, default=list)
    current_round: Mapped[Optional[dict[str, str]]] = mapped_column(
        JSON, nullable=True
    )
    state: Mapped[str] = mapped_column(index=True)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
