from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .core.logging_config import setup_logging
from .core.middleware import ExceptionHandlingMiddleware, register_exception_handlers
from .schemas.result import Result
from .storage import MemStorage, Storage

# Import routes
from .api.v1 import auth, user, households, chores


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """
    Build the API around a storage instance.

    A fresh MemStorage is created when none is given; state lives as long
    as the returned app.
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        description="ChoreTracker API - Household chore tracking",
        debug=settings.DEBUG,
    )
    app.state.storage = storage if storage is not None else MemStorage()

    register_exception_handlers(app)

    # Add exception handling middleware FIRST
    app.add_middleware(ExceptionHandlingMiddleware, log_internal_errors=True)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(
        auth.router, prefix=f"{settings.API_V1_STR}/auth", tags=["authentication"]
    )
    app.include_router(user.router, prefix=f"{settings.API_V1_STR}/users", tags=["users"])
    app.include_router(
        households.router,
        prefix=f"{settings.API_V1_STR}/households",
        tags=["households"]
    )
    app.include_router(
        chores.router,
        prefix=f"{settings.API_V1_STR}/chores",
        tags=["chores"]
    )

    @app.get("/", response_model=Result[dict])
    async def root():
        """Root endpoint with API information"""
        return Result.successful(
            data={
                "message": f"Welcome to {settings.PROJECT_NAME} API",
                "version": settings.VERSION,
                "docs": "/docs",
                "status": "online",
            }
        )

    @app.get("/health", response_model=Result[dict])
    async def health_check():
        """Health check endpoint for monitoring"""
        return Result.successful(data={"status": "healthy", "storage": "in-memory"})

    return app


app = create_app()
