"""Main FastAPI application module.

This module initializes the FastAPI application, registers all route handlers
and maps every error onto the ``{"error", "message"}`` JSON envelope.
"""

import logging
import traceback
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.logging_config import setup_logging
from config import (
    API_HOST,
    API_PORT,
    CORS_ALLOWED_ORIGINS,
    IS_DEVELOPMENT,
    JWT_SECRET,
    UPLOAD_DIR,
    UPLOAD_URL_PREFIX,
)
from core.database import init_db
from core.exceptions import ConstructionApiError
from api.routes import auth, company, inquiries, media, projects, services

API_TITLE = "Construction Site API"
API_VERSION = "1.0.0"

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI application
app = FastAPI(
    title=API_TITLE,
    description="Admin backend for the construction company website.",
    version=API_VERSION,
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register route handlers
app.include_router(auth.router)
app.include_router(media.router)
app.include_router(projects.router)
app.include_router(inquiries.router)
app.include_router(services.router)
app.include_router(company.router)

# Serve uploaded images
UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=str(UPLOAD_DIR)), name="uploads")


@app.exception_handler(ConstructionApiError)
async def handle_api_error(request: Request, exc: ConstructionApiError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        title = HTTPStatus(exc.status_code).phrase
    except ValueError:
        title = "Error"
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Cannot {request.method} {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": title, "message": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"error": "Validation Error", "message": "Invalid input data", "errors": errors},
    )


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    content = {"error": "Server Error", "message": "An unexpected error occurred"}
    # Details are only exposed in development
    if IS_DEVELOPMENT:
        content["details"] = str(exc)
        content["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return JSONResponse(status_code=500, content=content)


@app.on_event("startup")
def startup_tasks() -> None:
    """Create tables and warn about missing configuration."""
    init_db()
    if not JWT_SECRET:
        logger.warning("JWT_SECRET is not set; login and protected routes will fail")


@app.get("/", summary="API root", tags=["Info"])
def root() -> dict:
    """API root path, returns API information and endpoint list.

    Returns:
        Dictionary with API information.
    """
    return {
        "message": f"Welcome to {API_TITLE}",
        "version": API_VERSION,
        "endpoints": {
            "health": "/health",
            "auth": "/api/auth",
            "projects": "/api/projects",
            "inquiries": "/api/inquiries",
            "services": "/api/services",
            "company": "/api/company",
            "media": "/api/media",
        },
    }


@app.get("/health", summary="Health check", tags=["Health"])
def health() -> dict:
    """Health check endpoint.

    Returns:
        Dictionary with status "ok".
    """
    return {"status": "ok"}


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    logger.info("Starting API server on http://%s:%s", API_HOST, API_PORT)
    uvicorn.run("app:app", host=API_HOST, port=API_PORT)
