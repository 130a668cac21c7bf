from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.core.config import Settings, settings as default_settings
from app.core.database import Database
from app.core.errors import handle_unexpected, register_exception_handlers
from app.core.security import TokenValidator
from app.routers import health, tasks

logger = logging.getLogger("app")


def configure_logging(level: str):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(
    settings: Settings = default_settings,
    database: Database = None,
    token_validator: TokenValidator = None,
) -> FastAPI:
    """Build the API. Database and token validator can be injected (tests)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database(settings.DATABASE_URL)
        validator = token_validator or TokenValidator(
            settings.AUTH_VALIDATE_URL, timeout=settings.AUTH_TIMEOUT_SECONDS
        )
        db.create_all()
        app.state.database = db
        app.state.token_validator = validator
        logger.info(f"The MicroService Tasks is running on port {settings.PORT}")
        yield
        validator.close()
        db.dispose()

    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Tasks MicroService",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Déclaré avant CORS: le middleware CORS l'enveloppe, y compris pour les 500 imprévues
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            response = await handle_unexpected(request, e)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} - {elapsed_ms:.1f} ms")
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.CORS_ORIGIN],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return f"The MicroService Tasks is running on port {settings.PORT}"

    # Routes
    app.include_router(health.router, prefix="/health")
    app.include_router(tasks.router, prefix="/ms/task")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=default_settings.PORT)
