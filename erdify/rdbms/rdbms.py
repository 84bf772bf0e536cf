from typing import ClassVar, Dict, Optional

from pydantic import BaseModel
from sqlalchemy.engine import URL

from erdify.errors import CatalogUnavailableError
from erdify.type import ColumnType


class Rdbms(BaseModel):
    engine: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    db: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    # native name and default limit per column type, as the engine reports them
    NATIVE_DATABASE_TYPES: ClassVar[Optional[Dict[ColumnType, Dict]]] = None

    def create_engine_url(cls) -> str:
        if cls.engine is None:
            raise NotImplementedError("Subclasses should implement this method")

        url = URL.create(
            drivername=cls.engine,
            username=cls.username,
            password=cls.password,
            host=cls.host,
            port=cls.port,
            database=cls.db,
        )

        return url.render_as_string(hide_password=False)

    def native_database_types(cls) -> Dict[ColumnType, Dict]:
        return {
            data_type: dict(native) for data_type, native in cls._catalog().items()
        }

    def native_limit(cls, data_type: ColumnType) -> Optional[int]:
        native = cls._catalog().get(ColumnType(data_type), {})
        return native.get("limit")

    def _catalog(cls) -> Dict[ColumnType, Dict]:
        if cls.NATIVE_DATABASE_TYPES is None:
            raise CatalogUnavailableError(
                f"No native type catalog for engine {cls.engine!r}"
            )
        return cls.NATIVE_DATABASE_TYPES
