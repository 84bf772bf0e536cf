import functools
import logging
from typing import Callable, List, Optional

from erdify.config import MANDATORY_MARKER
from erdify.errors import InvalidColumnError
from erdify.schema.column import Column
from erdify.schema.model import Model
from erdify.type import LIMITED_TYPES, AssociationMacro, ColumnType, ValidationKind

TIMESTAMP_NAMES = frozenset(["created_at", "updated_at", "created_on", "updated_on"])

NativeLimits = Callable[[ColumnType], Optional[int]]


@functools.total_ordering
class Attribute:
    """One column of one model, classified for an entity-relationship diagram.

    ``native_limits`` returns the database's default limit for a column type
    and defaults to the catalog of ``domain``. Declared limits equal to that
    default are not reported. Attributes compare by column name only.
    """

    def __init__(
        self,
        domain,
        model: Model,
        column: Column,
        native_limits: Optional[NativeLimits] = None,
    ):
        if column is None:
            raise InvalidColumnError(
                f"Invalid column for model {getattr(model, 'name', model)!r}"
            )

        if native_limits is None and domain is not None:
            native_limits = domain.native_limit

        self._domain = domain
        self._model = model
        self._column = column
        self._native_limits = native_limits

    @classmethod
    def from_model(
        cls, domain, model: Model, native_limits: Optional[NativeLimits] = None
    ) -> List["Attribute"]:
        # primary key first, other columns keep their declared order
        columns = sorted(
            model.columns, key=lambda column: column.name != model.primary_key
        )
        return [cls(domain, model, column, native_limits) for column in columns]

    @property
    def domain(self):
        return self._domain

    @property
    def model(self) -> Model:
        return self._model

    @property
    def column(self) -> Column:
        return self._column

    @property
    def name(self) -> str:
        return self._column.name

    @property
    def type(self) -> ColumnType:
        return self._column.type

    def is_primary_key(self) -> bool:
        primary_key = self._model.primary_key
        return primary_key is not None and self.name == primary_key

    def is_foreign_key(self) -> bool:
        for association in self._model.reflect_on_all_associations(
            AssociationMacro.BELONGS_TO
        ):
            if association.foreign_key_name() == self.name:
                return True

        if self._domain is None:
            return False

        return any(
            association.foreign_key_name() == self.name
            for association in self._domain.associations_targeting(self._model)
        )

    def is_mandatory(self) -> bool:
        if self._column.null is False:
            return True

        return any(
            rule.kind == ValidationKind.PRESENCE
            for rule in self._model.validators_on(self.name)
        )

    def is_timestamp(self) -> bool:
        return self.name in TIMESTAMP_NAMES

    def is_content(self) -> bool:
        return not (self.is_primary_key() or self.is_foreign_key() or self.is_timestamp())

    def limit(self) -> Optional[int]:
        declared = self._column.limit
        if self.type not in LIMITED_TYPES or declared is None:
            return None

        if declared == self._native_limit():
            return None

        return declared

    def type_description(self) -> str:
        description = self.type.value

        limit = self.limit()
        if limit is not None:
            description += f" ({limit})"

        if self.is_mandatory():
            description += self._mandatory_marker()

        return description

    def to_dict(self):
        return {
            "name": self.name,
            "type": self.type.value,
            "type_description": self.type_description(),
            "limit": self.limit(),
            "primary_key": self.is_primary_key(),
            "foreign_key": self.is_foreign_key(),
            "mandatory": self.is_mandatory(),
            "timestamp": self.is_timestamp(),
        }

    def _native_limit(self) -> Optional[int]:
        if self._native_limits is None:
            return None

        try:
            return self._native_limits(self.type)
        except LookupError as e:
            logging.warning(
                "No native limit for %s, keeping declared limit of %s: %s",
                self.type.value,
                self.name,
                e,
            )
            return None

    def _mandatory_marker(self) -> str:
        settings = getattr(self._domain, "settings", None)
        if settings is None:
            return MANDATORY_MARKER
        return settings.mandatory_marker

    def __eq__(self, other):
        if not isinstance(other, Attribute):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other):
        if not isinstance(other, Attribute):
            return NotImplemented
        return self.name < other.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"<Attribute column={self.name!r} type={self.type.value!r}>"
