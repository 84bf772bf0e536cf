from erdify.rdbms.rdbms import Rdbms
from erdify.type import ColumnType


class SQLite(Rdbms):
    engine: str = "sqlite"

    NATIVE_DATABASE_TYPES = {
        ColumnType.STRING: {"name": "varchar", "limit": 255},
        ColumnType.TEXT: {"name": "text"},
        ColumnType.INTEGER: {"name": "integer"},
        ColumnType.FLOAT: {"name": "float"},
        ColumnType.DECIMAL: {"name": "decimal"},
        ColumnType.DATETIME: {"name": "datetime"},
        ColumnType.TIMESTAMP: {"name": "datetime"},
        ColumnType.TIME: {"name": "time"},
        ColumnType.DATE: {"name": "date"},
        ColumnType.BINARY: {"name": "blob"},
        ColumnType.BOOLEAN: {"name": "boolean"},
    }
