import logging

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from erdify.config import Settings
from routers import erd

logging.basicConfig(level=Settings().log_level)

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(erd.router)


@app.get("/")
def root():
    return JSONResponse(
        content={"message": "Erdify API"}, status_code=status.HTTP_200_OK
    )
