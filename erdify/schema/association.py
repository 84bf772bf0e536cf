from typing import Optional

import inflection
from pydantic import BaseModel

from erdify.type import AssociationMacro


class Association(BaseModel):
    """A relationship declared by the ``owner`` model.

    ``belongs_to`` keeps its foreign key on the owner's table, ``has_one`` and
    ``has_many`` keep it on the target's table.
    """

    name: str
    macro: AssociationMacro
    owner: str
    class_name: Optional[str] = None
    foreign_key: Optional[str] = None

    def belongs_to(cls) -> bool:
        return cls.macro == AssociationMacro.BELONGS_TO

    def klass(cls) -> str:
        if cls.class_name:
            return cls.class_name
        return inflection.camelize(inflection.singularize(cls.name))

    def foreign_key_name(cls) -> str:
        if cls.foreign_key:
            return cls.foreign_key
        if cls.belongs_to():
            return f"{inflection.underscore(cls.name)}_id"
        return f"{inflection.underscore(cls.owner)}_id"
