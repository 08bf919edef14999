"""Database models package."""

from .agama import Agama
from .base import MAX_ROW_ID, Base
from .datadiri import DataDiri

__all__ = [
    "Agama",
    "Base",
    "DataDiri",
    "MAX_ROW_ID",
]
