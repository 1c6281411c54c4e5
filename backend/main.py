"""
Main module for the FastAPI application.
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.__version__ import __version__
from app.core.config import settings
from app.db.session import engine
from app.auth.routes import router as auth_router
from app.api.posts import router as posts_router
from app.api.comments import router as comments_router
from app.api.likes import router as likes_router

# Setup logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# Lifespan event handler
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan event handler - runs on startup and shutdown.
    """
    # Tables are created with Alembic migrations (see alembic/)
    logger.info(f"Blog API {__version__} starting")
    logger.info(f"Docs available at http://localhost:{settings.API_PORT}/docs")

    yield

    # Shutdown
    await engine.dispose()
    logger.info("Blog API shutting down")


app = FastAPI(
    title="Blog API",
    description="Posts, comments and likes behind JWT bearer authentication",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
if settings.CORS_ORIGINS:
    origins = settings.CORS_ORIGINS if isinstance(settings.CORS_ORIGINS, list) else [settings.CORS_ORIGINS]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Include routers
app.include_router(auth_router, prefix="/api/auth")
app.include_router(posts_router, prefix="/api")
app.include_router(likes_router, prefix="/api")
app.include_router(comments_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint"""
    return {"status": "running", "version": __version__}


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.API_HOST, port=settings.API_PORT, reload=True, log_level="info")
