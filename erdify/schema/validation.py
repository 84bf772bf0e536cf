from typing import Any, Dict, List

from pydantic import BaseModel

from erdify.type import ValidationKind


class Validation(BaseModel):
    kind: ValidationKind
    attributes: List[str]
    # conditions such as "if" / "unless", kept as declared
    options: Dict[str, Any] = {}

    def applies_to(cls, name: str) -> bool:
        return name in cls.attributes
