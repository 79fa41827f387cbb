# main.py

"""
Application entry point for the Document Parser API.

This module initializes the FastAPI application, configures logging,
creates the scratch directories before the first request, registers the
routers and the JSON error handlers. It can be run directly with Uvicorn
for local development or deployed via ASGI servers in production.
"""

import logging
from contextlib import asynccontextmanager

# Config imports
from config import settings

# FASTAPI imports
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# APP imports
from app.errors import DocumentError
from app.routers.health import router as health_router
from app.routers.parser import router as parser_router
from app.services.storage import bootstrap_directories

# Console logging
root = logging.getLogger()
root.setLevel(settings.LOG_LEVEL)
if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    root.addHandler(handler)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    bootstrap_directories()
    logger.info(
        "Document parser server running at http://localhost:%d", settings.APP_PORT
    )
    yield


app = FastAPI(
    title="Document Parser",
    description=(
        "Uploads a PDF or Word document, extracts its plain text, stores it"
        " in a scratch directory and returns a short preview."
    ),
    version="1.0",
    lifespan=lifespan,
)

# CORS Middleware configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(DocumentError)
async def document_error_handler(request: Request, exc: DocumentError) -> JSONResponse:
    logger.warning(
        "%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("VALIDATION ERROR %s %s -> %s", request.method, request.url.path, exc)
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("UNHANDLED %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": str(exc) or "Something went wrong!"},
    )


# Router Registration
app.include_router(health_router)
app.include_router(parser_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)
