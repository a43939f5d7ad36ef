import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from thingful.core.exceptions import (
    ConflictError,
    StorageError,
    ThingfulError,
    UserNotFoundError,
    ValidationError,
)
from thingful.database.connection import Base, engine
from thingful.models import model  # noqa: F401
from thingful.repositories.settings import settings
from thingful.routers import system_router, user_router
from thingful.version import __version__

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # stuff to do when app starts
    Base.metadata.create_all(bind=engine)
    yield
    # stuff to do when app stops


app = FastAPI(version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
@app.exception_handler(ConflictError)
async def bad_request_handler(request: Request, exc: ThingfulError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message}
    )


def request_error_message(error: dict) -> str:
    """Turn one FastAPI validation error into a single sentence."""
    loc = error.get("loc", ())
    if error.get("type") == "json_invalid":
        return "Request body must be valid JSON"
    if len(loc) < 2:
        return f"Invalid request {loc[0] if loc else 'body'}"
    return f"Invalid '{loc[-1]}' in request {loc[0]}"


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = request_error_message(errors[0]) if errors else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": message}
    )


@app.exception_handler(UserNotFoundError)
async def not_found_handler(request: Request, exc: UserNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.message}
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(
        f"Storage failure on {request.method} {request.url.path}",
        exc_info=exc.__cause__ or exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.message},
    )


app.include_router(user_router.user_Router)
app.include_router(system_router.system_Router)

if __name__ == "__main__":
    uvicorn.run(
        "thingful.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
