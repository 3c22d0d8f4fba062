import logging
import os

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from homes_api.routers import homes

LOG_LEVEL = os.getenv("HOMES_LOG_LEVEL", "INFO").upper()

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO),
                    format="%(asctime)s | %(levelname)s | %(message)s")
LOG = logging.getLogger("homes.api")

app = FastAPI(
    title="Homes Listings API",
    version="1.0.0",
    description="Create, read, update and delete home listings."
)

app.include_router(homes.router)

@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    # Bad or missing body fields are a client error, reported as 400
    LOG.info("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

@app.exception_handler(SQLAlchemyError)
async def storage_error(request: Request, exc: SQLAlchemyError):
    LOG.error("%s %s storage failure", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Storage error"})

@app.get("/health")
def health():
    return {"status": "ok"}
