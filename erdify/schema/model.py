import logging
from typing import List, Optional

import inflection
from pydantic import BaseModel

from erdify.schema.association import Association
from erdify.schema.column import Column
from erdify.schema.validation import Validation
from erdify.type import AssociationMacro, ColumnType, ValidationKind


class Model(BaseModel):
    name: str
    table_name: Optional[str] = None
    primary_key: Optional[str] = "id"
    columns: List[Column] = []
    associations: List[Association] = []
    validations: List[Validation] = []

    def column(cls, name: str) -> Optional[Column]:
        for column in cls.columns:
            if column.name == name:
                return column
        return None

    def reflect_on_all_associations(
        cls, macro: Optional[AssociationMacro] = None
    ) -> List[Association]:
        if macro is None:
            return list(cls.associations)
        return [assoc for assoc in cls.associations if assoc.macro == macro]

    def validators_on(cls, name: str) -> List[Validation]:
        return [rule for rule in cls.validations if rule.applies_to(name)]

    def add_column(cls, name: str, data_type: ColumnType, **options) -> "Model":
        data_type = ColumnType(data_type)
        if data_type == ColumnType.REFERENCES:
            name = f"{name}_id"
            data_type = ColumnType.INTEGER

        cls.columns.append(Column(name=name, type=data_type, **options))
        return cls

    def set_primary_key(cls, name: Optional[str]) -> "Model":
        cls.primary_key = name
        return cls

    def belongs_to(cls, name: str, **options) -> "Model":
        return cls._associate(name, AssociationMacro.BELONGS_TO, options)

    def has_one(cls, name: str, **options) -> "Model":
        return cls._associate(name, AssociationMacro.HAS_ONE, options)

    def has_many(cls, name: str, **options) -> "Model":
        return cls._associate(name, AssociationMacro.HAS_MANY, options)

    def has_and_belongs_to_many(cls, name: str, **options) -> "Model":
        return cls._associate(name, AssociationMacro.HAS_AND_BELONGS_TO_MANY, options)

    def validates(cls, *names: str, presence: bool = False, **options) -> "Model":
        if presence:
            cls.validations.append(
                Validation(
                    kind=ValidationKind.PRESENCE, attributes=list(names), options=options
                )
            )
        return cls

    def validates_presence_of(cls, *names: str, **options) -> "Model":
        return cls.validates(*names, presence=True, **options)

    def _associate(cls, name, macro, options) -> "Model":
        cls.associations.append(
            Association(name=name, macro=macro, owner=cls.name, **options)
        )
        return cls

    @classmethod
    def from_table(cls, name: str, table) -> "Model":
        """Build a model from a SQLAlchemy ``Table``.

        Every ``ForeignKey`` becomes a ``belongs_to`` association named after
        the referenced table. Composite primary keys are not represented.
        """
        primary_key = None
        key_columns = list(table.primary_key.columns)
        if len(key_columns) == 1:
            primary_key = key_columns[0].name
        elif key_columns:
            logging.debug(
                "Composite primary key on %s: %s",
                table.name,
                ", ".join(c.name for c in key_columns),
            )

        model = cls(
            name=name,
            table_name=table.name,
            primary_key=primary_key,
            columns=[Column.from_sqlalchemy(c) for c in table.columns],
        )

        for foreign_key in table.foreign_keys:
            target = inflection.camelize(inflection.singularize(foreign_key.column.table.name))
            model.belongs_to(
                inflection.underscore(target),
                class_name=target,
                foreign_key=foreign_key.parent.name,
            )

        return model
