"""
Request Collections - FastAPI Application Entry Point

Stores workspaces, folders and HTTP/gRPC requests, and resolves the
authentication and headers each request inherits from its folders and
workspace.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .database import init_db
from .exceptions import register_exception_handlers
from .observability import setup_logging
from .routers import folders, requests, workspaces

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    setup_logging(settings.log_level)
    init_db()
    logger.info("Request collections API started")
    yield
    logger.info("Request collections API shutting down")


app = FastAPI(
    title="Request Collections",
    description="Workspace, folder and request store with inherited auth and headers",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register global exception handlers
register_exception_handlers(app)


@app.get("/")
async def root():
    """Root endpoint returning API information."""
    return {
        "name": "Request Collections",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Register routers
app.include_router(workspaces.router)
app.include_router(folders.router)
app.include_router(requests.http_router)
app.include_router(requests.grpc_router)
