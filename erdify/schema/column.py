from typing import Any, Optional

from pydantic import BaseModel
from sqlalchemy import types as sqltypes

from erdify.errors import UnsupportedColumnTypeError
from erdify.type import ColumnType

# most specific SQLAlchemy types first, subclasses shadow their bases
SQLALCHEMY_TO_COLUMN_TYPE = [
    (sqltypes.TIMESTAMP, ColumnType.TIMESTAMP),
    (sqltypes.DateTime, ColumnType.DATETIME),
    (sqltypes.Date, ColumnType.DATE),
    (sqltypes.Time, ColumnType.TIME),
    (sqltypes.Text, ColumnType.TEXT),
    (sqltypes.String, ColumnType.STRING),
    (sqltypes.Boolean, ColumnType.BOOLEAN),
    (sqltypes.Integer, ColumnType.INTEGER),
    (sqltypes.Float, ColumnType.FLOAT),
    (sqltypes.Numeric, ColumnType.DECIMAL),
    ((sqltypes.LargeBinary, sqltypes.BINARY, sqltypes.VARBINARY), ColumnType.BINARY),
]


class Column(BaseModel):
    name: str
    type: ColumnType
    limit: Optional[int] = None
    null: bool = True
    default: Optional[Any] = None

    @classmethod
    def from_sqlalchemy(cls, column) -> "Column":
        """Describe a SQLAlchemy ``Column`` (e.g. from ``Table.columns``)."""
        for sqlalchemy_type, data_type in SQLALCHEMY_TO_COLUMN_TYPE:
            if isinstance(column.type, sqlalchemy_type):
                break
        else:
            raise UnsupportedColumnTypeError(
                f"Unsupported data type: {column.type!r} on column {column.name}"
            )

        limit = None
        if data_type in (ColumnType.STRING, ColumnType.BINARY):
            limit = column.type.length

        default = None
        if column.default is not None and column.default.is_scalar:
            default = column.default.arg

        return cls(
            name=column.name,
            type=data_type,
            limit=limit,
            null=bool(column.nullable),
            default=default,
        )
