import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .core.config import Settings, get_settings
from .core.errors import install_error_handlers
from .routers import api_router          # all sub-routers live under /api
from .services.database import Database

log = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()     # fails fast without JWT_SECRET
    logging.basicConfig(level=settings.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = FastAPI(title="Mflix Catalog")
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)
    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def health() -> str:
        return "Mflix catalog API is running"

    # database lifecycle ----------------------------------------------
    @app.on_event("startup")
    async def _connect() -> None:
        app.state.db = Database.connect(settings)
        await app.state.db.ensure_indexes()
        log.info("connected to MongoDB")

    @app.on_event("shutdown")
    async def _disconnect() -> None:
        db = getattr(app.state, "db", None)
        if db is not None:
            db.close()

    return app


app = create_app()
