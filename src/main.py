"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infrastructure.config import APP_LOGGER_NAME, get_logger, get_settings, setup_logger
from infrastructure.database import init_db, close_db
from presentation.api.error_handlers import register_error_handlers
from presentation.api.v1.endpoints import (
    applications,
    curricula,
    health,
    job_offers,
    professionals,
    professions,
    statistics,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    
    # Setup logging
    setup_logger(
        name=APP_LOGGER_NAME,
        level=settings.log_level,
        log_format=settings.log_format,
    )
    
    # Initialize database
    get_logger(__name__).info(f"Starting {settings.app_name} ({settings.environment})")
    await init_db()
    
    yield
    
    # Shutdown
    await close_db()


def create_app() -> FastAPI:
    """Build the FastAPI application with every v1 router."""
    settings = get_settings()
    
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_error_handlers(app)
    
    # Include routers
    for module in (health, job_offers, applications, professions, curricula, professionals, statistics):
        app.include_router(module.router, prefix=settings.api_v1_prefix)
    
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running"
        }
    
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    settings = get_settings()
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
