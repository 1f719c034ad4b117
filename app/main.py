from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import Engine
from app.core.config import Settings, get_settings
from app.core.middleware_correlation import CorrelationIdMiddleware
from app.core.logging import setup_logging
from app.core.errors import register_exception_handlers
from app.db.session import build_engine, build_session_factory


# Routers
from app.api.routes.books import router as books_router
from app.api.routes.categories import router as categories_router
from app.api.routes.health import router as health_router


def create_app(engine: Engine | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the application around a database engine.
    The engine defaults to one built from settings; tests pass their own.
    """
    settings = settings or get_settings()
    engine = engine or build_engine(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Bookstore Catalog API - CRUD and discovery over the book catalog.",
        version="1.0.0",
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
    )
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # Permissive CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    # Root endpoint
    @app.get("/")
    async def root():
        """API root endpoint with basic information."""
        return {
            "message": "Welcome to Bookstore Catalog API",
            "version": "1.0.0",
            "docs_url": "/docs",
            "api_v1_str": settings.API_V1_STR,
            "endpoints": {
                "books": f"{settings.API_V1_STR}/books",
                "categories": f"{settings.API_V1_STR}/categories",
                "health": "/health",
            },
        }

    register_exception_handlers(app)

    # Mount routers
    api = APIRouter(prefix=settings.API_V1_STR)
    api.include_router(books_router)
    api.include_router(categories_router)
    app.include_router(api)
    app.include_router(health_router)

    return app


setup_logging(get_settings().LOG_LEVEL)

app = create_app()
