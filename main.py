from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import Settings, settings as default_settings
from database import create_db_engine, create_session_factory
from errors import register_error_handlers
from routes import router
from seed import init_database

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown logic"""
        engine = create_db_engine(settings)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        try:
            init_database(engine, app.state.session_factory, seed_sample=settings.SEED_SAMPLE_DATA)
            logger.info("Database initialized successfully")
        except Exception as e:
            logger.warning(f"Database initialization failed: {e}")
        yield
        logger.info("Shutting down...")
        engine.dispose()

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        docs_url=settings.DOCS_URL,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    @app.get("/")
    def read_root():
        return {
            "message": "Sample Schema API is running!",
            "version": settings.API_VERSION,
            "docs": settings.DOCS_URL,
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint for monitoring"""
        return {"status": "healthy", "service": "sample-schema-api"}

    # Register routes
    app.include_router(router, prefix="/api")

    return app


logging.basicConfig(level=default_settings.LOG_LEVEL)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=default_settings.PORT)
