from erdify.rdbms.rdbms import Rdbms
from erdify.type import ColumnType


class MySQL(Rdbms):
    engine: str = "mysql"

    NATIVE_DATABASE_TYPES = {
        ColumnType.STRING: {"name": "varchar", "limit": 255},
        ColumnType.TEXT: {"name": "text"},
        ColumnType.INTEGER: {"name": "int", "limit": 4},
        ColumnType.FLOAT: {"name": "float"},
        ColumnType.DECIMAL: {"name": "decimal"},
        ColumnType.DATETIME: {"name": "datetime"},
        ColumnType.TIMESTAMP: {"name": "datetime"},
        ColumnType.TIME: {"name": "time"},
        ColumnType.DATE: {"name": "date"},
        ColumnType.BINARY: {"name": "blob"},
        ColumnType.BOOLEAN: {"name": "tinyint", "limit": 1},
    }
