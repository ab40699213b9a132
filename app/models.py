from __future__ import annotations

from datetime import datetime
from enum import Enum

from sqlmodel import Field, SQLModel


class SleepMode(str, Enum):
    BEDTIME = "bedtime"
    WAKETIME = "waketime"


class QualityTier(str, Enum):
    OPTIMAL = "optimal"
    GOOD = "good"
    FAIR = "fair"


class User(SQLModel, table=True):
    telegram_id: int = Field(primary_key=True, description="Telegram chat id")
    timezone: str = Field(default="Europe/Moscow", description="IANA-зона для расчёта текущего времени")
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
