"""Create agamas and datadiri tables

Revision ID: 5c1e0a7d2f43
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5c1e0a7d2f43"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

DATADIRI_TEXT_COLUMNS = (
    "nama",
    "nik",
    "jenis_pegawai",
    "status_pegawai",
    "unit",
    "sub_unit",
    "pendidikan",
    "tanggal_lahir",
    "tempat_lahir",
    "jenis_kelamin",
    "agama",
    "foto",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "agamas",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("nama_agama", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "datadiri",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        *[sa.Column(name, sa.String(255), nullable=False) for name in DATADIRI_TEXT_COLUMNS],
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("datadiri")
    op.drop_table("agamas")
