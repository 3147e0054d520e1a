"""FastAPI application, the main entrypoint for zipslack."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from zipslack.app.api.channels import router as channels_router
from zipslack.app.api.headers import failure_alert
from zipslack.app.api.mentions import router as mentions_router
from zipslack.app.api.messages import router as messages_router
from zipslack.app.api.resource import API_PREFIX
from zipslack.app.api.user_profiles import router as user_profiles_router
from zipslack.app.api.workspaces import router as workspaces_router
from zipslack.app.config import settings
from zipslack.app.db import engine, init_db
from zipslack.app.errors import ZipslackError

logger = logging.getLogger(__name__)

# Configure logging for our app modules so INFO/DEBUG logs are visible.
# Uvicorn's log_level="info" only affects its own logger, not ours.
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(levelname)s:%(name)s: %(message)s",
)
logging.getLogger("zipslack").setLevel(logging.DEBUG)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    await init_db()
    yield
    await engine.dispose()


app = FastAPI(
    title="zipslack",
    description="Workspaces, channels, messages and mentions",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.frontend_url,
        f"http://localhost:{settings.port}",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)


# --- Exception handlers ---


@app.exception_handler(ZipslackError)
async def _zipslack_error_handler(request: Request, exc: ZipslackError) -> JSONResponse:
    logger.debug(
        "Rejected %s %s: %s (%s)", request.method, request.url.path, exc.message, exc.error_key
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.message,
            "entity_name": exc.entity_name,
            "error_key": exc.error_key,
            "message": f"error.{exc.error_key}",
        },
        headers=failure_alert(exc.entity_name, exc.error_key),
    )


@app.exception_handler(RequestValidationError)
async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies are caller-fixable: report them as 400, not 422."""
    logger.debug("Invalid request body on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={"detail": "Validation error", "errors": _jsonable_errors(exc)},
    )


def _jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch unhandled exceptions and return a clean JSON 500 instead of a stack trace."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Include routers
app.include_router(workspaces_router, prefix=API_PREFIX)
app.include_router(channels_router, prefix=API_PREFIX)
app.include_router(mentions_router, prefix=API_PREFIX)
app.include_router(user_profiles_router, prefix=API_PREFIX)
app.include_router(messages_router, prefix=API_PREFIX)


# --- Health check ---


@app.get("/api/health")
async def health() -> dict[str, str]:
    """Health check with DB connectivity verification."""
    db_ok = "ok"
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        db_ok = "error"
        logger.exception("Health check: database connectivity failed")

    return {
        "status": "ok" if db_ok == "ok" else "degraded",
        "database": db_ok,
    }
