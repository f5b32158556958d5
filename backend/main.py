"""
Code Wallah Backend - FastAPI Application Entry Point
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from routers import config, files, generate, workspace
from services.config_manager import ConfigManager
from services.errors import InvalidRequestError, MissingAPIKeyError, WallahError

logger = logging.getLogger("codewallah")


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    config_manager = ConfigManager.get_instance()
    configure_logging(config_manager.get("logLevel", "INFO"))
    logger.info("[Backend] Starting Code Wallah Backend...")

    # Refuse to serve without credentials for the upstream model
    config_manager.require_api_key()
    logger.info("[Backend] Using Gemini model %s", config_manager.get_config()["gemini"]["model"])

    yield
    logger.info("[Backend] Shutting down Code Wallah Backend...")


app = FastAPI(
    title="Code Wallah Backend",
    description="On-demand website generation backed by Gemini",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WallahError)
async def wallah_error_handler(request: Request, exc: WallahError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body problems are client errors (400) rather than FastAPI's 422"""
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        error = InvalidRequestError(error="Invalid JSON")
    else:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}" for error in errors
        )
        error = InvalidRequestError(details)
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


# Include routers
app.include_router(generate.router, prefix="/api", tags=["generate"])
app.include_router(files.router, prefix="/api/files", tags=["files"])
app.include_router(workspace.router, prefix="/api/workspace", tags=["workspace"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/api/health")
async def api_health_check():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    config_manager = ConfigManager.get_instance()
    configure_logging(config_manager.get("logLevel", "INFO"))
    try:
        config_manager.require_api_key()
    except MissingAPIKeyError as e:
        logger.critical("[Backend] %s", e)
        sys.exit(1)

    server = config_manager.get_config()["server"]
    uvicorn.run(app, host=server["host"], port=server["port"])
