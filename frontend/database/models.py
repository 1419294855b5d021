# frontend/database/models.py
from datetime import datetime

from sqlalchemy import Column, Text
from sqlmodel import SQLModel, Field


class StoredValue(SQLModel, table=True):
    """One client-side state key. The value is raw JSON text, so a corrupt
    entry can exist and is only detected when it is read back."""

    key: str = Field(primary_key=True)
    value: str = Field(sa_column=Column(Text, nullable=False))
    updated_at: datetime = Field(default_factory=datetime.utcnow)
