import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.database import Database

from filmrating.database import MongoConnection, get_db
from filmrating.errors import register_exception_handlers
from filmrating.movies.router import router as movies_router
from filmrating.producers.router import router as producers_router
from filmrating.ratings.router import router as ratings_router
from filmrating.settings import Settings, configure_logging, load_settings

logger = logging.getLogger(__name__)


def create_app(connection: Optional[MongoConnection] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application.

    Without an explicit ``connection`` the MongoDB handle is built from
    ``settings`` (or the environment). The connection is opened on startup
    and closed on shutdown.
    """
    if connection is None:
        settings = settings or load_settings()
        connection = MongoConnection(settings.database_url, settings.database_name)
    cors_origins = settings.cors_origins if settings else ["*"]

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        connection.open()
        try:
            yield
        finally:
            connection.close()

    app = FastAPI(title="Film Rating API", lifespan=lifespan)
    app.state.connection = connection

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/")
    def read_root():
        return {"message": "Film Rating Backend Ready"}

    @app.get("/test")
    def test_database(db: Database = Depends(get_db)):
        response = {
            "backend": "✅ Running",
            "database": "✅ Available",
            "database_name": db.name,
            "connection_status": "Connected",
            "collections": [],
        }
        try:
            response["collections"] = db.list_collection_names()
            response["database"] = "✅ Connected & Working"
        except Exception as e:
            logger.warning("Database check failed: %s", e)
            response["database"] = f"⚠️ Connected but Error: {str(e)[:50]}"
            response["connection_status"] = "Error"
        return response

    app.include_router(movies_router)
    app.include_router(producers_router)
    app.include_router(ratings_router)
    return app


if __name__ == "__main__":
    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port)
