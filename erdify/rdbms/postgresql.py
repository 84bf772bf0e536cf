from erdify.rdbms.rdbms import Rdbms
from erdify.type import ColumnType


class PostgreSQL(Rdbms):
    engine: str = "postgresql"

    NATIVE_DATABASE_TYPES = {
        ColumnType.STRING: {"name": "character varying"},
        ColumnType.TEXT: {"name": "text"},
        ColumnType.INTEGER: {"name": "integer"},
        ColumnType.FLOAT: {"name": "float"},
        ColumnType.DECIMAL: {"name": "decimal"},
        ColumnType.DATETIME: {"name": "timestamp"},
        ColumnType.TIMESTAMP: {"name": "timestamp"},
        ColumnType.TIME: {"name": "time"},
        ColumnType.DATE: {"name": "date"},
        ColumnType.BINARY: {"name": "bytea"},
        ColumnType.BOOLEAN: {"name": "boolean"},
    }
