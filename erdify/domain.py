import logging
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from erdify.attribute import Attribute
from erdify.config import Settings
from erdify.errors import DuplicateModelError, UnknownModelError
from erdify.rdbms.rdbms import Rdbms
from erdify.schema.association import Association
from erdify.schema.model import Model
from erdify.type import AssociationMacro, ColumnType


class Domain(BaseModel):
    """All models of one diagram, plus the database catalog they live in.

    Attributes keep a reference to their domain to find associations that
    other models declare towards their own model.
    """

    models: Dict[str, Model] = {}
    settings: Settings = Field(default_factory=Settings)
    rdbms: Optional[Rdbms] = None

    @classmethod
    def generate(
        cls, models: Iterable[Model] = (), settings: Optional[Settings] = None
    ) -> "Domain":
        if settings is None:
            settings = Settings()

        domain = cls(settings=settings, rdbms=settings.create_rdbms())
        for model in models:
            domain.add_model(model)

        logging.info(
            "Generated domain with %d models on %s",
            len(domain.models),
            domain.rdbms.engine,
        )
        return domain

    def add_model(self, model: Model) -> Model:
        if model.name in self.models:
            raise DuplicateModelError(f"Model {model.name} is already defined")

        self.models[model.name] = model
        return model

    def model(self, name: str) -> Optional[Model]:
        return self.models.get(name)

    def associations_targeting(self, model: Model) -> List[Association]:
        """``has_one`` / ``has_many`` associations of any model pointing at ``model``."""
        return [
            association
            for candidate in self.models.values()
            for association in candidate.associations
            if association.macro in (AssociationMacro.HAS_ONE, AssociationMacro.HAS_MANY)
            and association.klass() == model.name
        ]

    def native_limit(self, data_type: ColumnType) -> Optional[int]:
        if self.rdbms is None:
            return None
        return self.rdbms.native_limit(data_type)

    def attributes_for(self, name: str) -> List[Attribute]:
        model = self.model(name)
        if model is None:
            raise UnknownModelError(name)

        return sorted(Attribute.from_model(self, model))
