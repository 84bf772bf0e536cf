from enum import Enum


class ColumnType(str, Enum):
    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    DATETIME = "datetime"
    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"
    BOOLEAN = "boolean"
    BINARY = "binary"
    REFERENCES = "references"


class AssociationMacro(str, Enum):
    BELONGS_TO = "belongs_to"
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"
    HAS_AND_BELONGS_TO_MANY = "has_and_belongs_to_many"


class ValidationKind(str, Enum):
    PRESENCE = "presence"
    UNIQUENESS = "uniqueness"
    LENGTH = "length"
    FORMAT = "format"
    NUMERICALITY = "numericality"
    INCLUSION = "inclusion"


# types whose columns carry a size bound
LIMITED_TYPES = frozenset([ColumnType.STRING, ColumnType.BINARY, ColumnType.INTEGER])
