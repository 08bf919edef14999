"""Resource descriptors.

Every CRUD resource the API exposes is described by one ``Resource`` entry.
Routers, repositories and schemas are all built from these descriptors, so
adding a resource means adding a row here.
"""

from dataclasses import dataclass, field

from .models import Agama, Base, DataDiri


@dataclass(frozen=True)
class Resource:
    """Metadata for one CRUD resource.

    Attributes:
        name: URL path segment, e.g. ``"agama"`` for ``/agama``.
        display_name: Human readable name used in response messages.
        model: ORM model of the backing table.
        filter_field: Text column matched by the ``search`` query parameter.
        mutable_fields: Columns this resource reads and writes, in output order.
        required_fields: Subset of ``mutable_fields`` a create request must carry.
    """

    name: str
    display_name: str
    model: type[Base]
    filter_field: str
    mutable_fields: tuple[str, ...]
    required_fields: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        columns = set(self.model.__table__.columns.keys())
        unknown = [f for f in self.mutable_fields if f not in columns]
        if unknown:
            raise ValueError(f"{self.name}: unknown columns {unknown} on {self.table_name}")
        if self.filter_field not in self.mutable_fields:
            raise ValueError(f"{self.name}: filter field {self.filter_field!r} is not mutable")
        if not set(self.required_fields) <= set(self.mutable_fields):
            raise ValueError(f"{self.name}: required fields must be mutable fields")

    @property
    def table_name(self) -> str:
        return self.model.__tablename__


PEGAWAI_FIELDS = (
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

AGAMA = Resource(
    name="agama",
    display_name="Agama",
    model=Agama,
    filter_field="nama_agama",
    mutable_fields=("nama_agama",),
    required_fields=("nama_agama",),
)

JENIS_KELAMIN = Resource(
    name="jeniskelamin",
    display_name="Jenis Kelamin",
    model=DataDiri,
    filter_field="jenis_kelamin",
    mutable_fields=("jenis_kelamin",),
    required_fields=("jenis_kelamin",),
)

JENIS_PEGAWAI = Resource(
    name="jenispegawai",
    display_name="Jenis Pegawai",
    model=DataDiri,
    filter_field="jenis_pegawai",
    mutable_fields=("jenis_pegawai",),
    required_fields=("jenis_pegawai",),
)

PEGAWAI = Resource(
    name="pegawai",
    display_name="Pegawai",
    model=DataDiri,
    filter_field="nama",
    mutable_fields=PEGAWAI_FIELDS,
    required_fields=("nama",),
)

PENDIDIKAN = Resource(
    name="pendidikan",
    display_name="Pendidikan",
    model=DataDiri,
    filter_field="pendidikan",
    mutable_fields=("pendidikan",),
    required_fields=("pendidikan",),
)

STATUS_PEGAWAI = Resource(
    name="statuspegawai",
    display_name="Status Pegawai",
    model=DataDiri,
    filter_field="status_pegawai",
    mutable_fields=("status_pegawai",),
    required_fields=("status_pegawai",),
)

RESOURCES: tuple[Resource, ...] = (
    AGAMA,
    JENIS_KELAMIN,
    JENIS_PEGAWAI,
    PEGAWAI,
    PENDIDIKAN,
    STATUS_PEGAWAI,
)
