"""Agama (religion) model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Agama(Base):
    """Religion lookup values, one row per religion."""

    __tablename__ = "agamas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nama_agama: Mapped[str] = mapped_column(String(255), default="")
