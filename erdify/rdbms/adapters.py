from typing import Dict, Type, Union

from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

from erdify.errors import UnsupportedAdapterError
from erdify.rdbms.mysql import MySQL
from erdify.rdbms.postgresql import PostgreSQL
from erdify.rdbms.rdbms import Rdbms
from erdify.rdbms.sqlite import SQLite

ADAPTERS: Dict[str, Type[Rdbms]] = {
    "sqlite": SQLite,
    "sqlite3": SQLite,
    "postgresql": PostgreSQL,
    "postgres": PostgreSQL,
    "mysql": MySQL,
    "mysql2": MySQL,
    "mariadb": MySQL,
}


def for_adapter(name: str, **kwargs) -> Rdbms:
    try:
        adapter = ADAPTERS[name.lower()]
    except KeyError:
        raise UnsupportedAdapterError(f"Unsupported adapter: {name}") from None

    return adapter(**kwargs)


def from_url(url: Union[str, URL]) -> Rdbms:
    """Pick the catalog for a database URL, e.g. ``engine.url`` of a live engine."""
    try:
        url = make_url(url)
    except ArgumentError as e:
        raise UnsupportedAdapterError(f"Invalid database url: {url}") from e

    return for_adapter(
        url.get_backend_name(),
        host=url.host,
        port=url.port,
        db=url.database,
        username=url.username,
        password=url.password,
    )
