from typing import List, Optional

from fastapi import APIRouter, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from erdify.config import Settings
from erdify.domain import Domain
from erdify.errors import UnknownModelError
from erdify.schema.model import Model

router = APIRouter(prefix="/api/erd", tags=["erd"])


class Schema(BaseModel):
    models: List[Model]


@router.get("/")
async def root_erd():

    return JSONResponse(
        content={"message": "ERD Routers"}, status_code=status.HTTP_200_OK
    )


@router.post("/attributes")
async def attributes(model: str, payload: Schema, adapter: Optional[str] = None):

    settings = Settings()
    if adapter:
        settings = settings.model_copy(update={"adapter": adapter, "database_url": None})

    try:
        domain = Domain.generate(payload.models, settings)
        classified = domain.attributes_for(model)

    except UnknownModelError:
        return JSONResponse(
            content={"message": f"unknown model {model}"},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    except ValueError as e:
        return JSONResponse(
            content={"message": str(e)}, status_code=status.HTTP_400_BAD_REQUEST
        )

    return JSONResponse(
        content=jsonable_encoder([attr.to_dict() for attr in classified]),
        status_code=status.HTTP_200_OK,
    )
