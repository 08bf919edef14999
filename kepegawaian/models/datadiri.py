"""DataDiri model.

The ``datadiri`` table holds employee records, and the gender, employee type,
education and employment status resources read and write their own column of
it. Nothing isolates those writers from each other: two updates touching
different columns of the same row both land, last writer wins per column set.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class DataDiri(Base):
    """Employee personal data row."""

    __tablename__ = "datadiri"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nama: Mapped[str] = mapped_column(String(255), default="")
    nik: Mapped[str] = mapped_column(String(255), default="")
    jenis_pegawai: Mapped[str] = mapped_column(String(255), default="")
    status_pegawai: Mapped[str] = mapped_column(String(255), default="")
    unit: Mapped[str] = mapped_column(String(255), default="")
    sub_unit: Mapped[str] = mapped_column(String(255), default="")
    pendidikan: Mapped[str] = mapped_column(String(255), default="")
    tanggal_lahir: Mapped[str] = mapped_column(String(255), default="")
    tempat_lahir: Mapped[str] = mapped_column(String(255), default="")
    jenis_kelamin: Mapped[str] = mapped_column(String(255), default="")
    agama: Mapped[str] = mapped_column(String(255), default="")
    foto: Mapped[str] = mapped_column(String(255), default="")
