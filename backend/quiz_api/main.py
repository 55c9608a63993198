import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.trustedhost import TrustedHostMiddleware

from quiz_api.core.config import settings
from quiz_api.core.logging_config import setup_logging
from quiz_api.api.router import router
from quiz_api.db.session import Database

logger = logging.getLogger(__name__)


def create_app(database: Database | None = None) -> FastAPI:
    """Build the API.

    When ``database`` is given the caller owns it and it is not disposed
    on shutdown; otherwise one is created from ``DATABASE_URL`` at startup.
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database(settings.DATABASE_URL)
        app.state.database = db
        try:
            yield
        finally:
            if database is None:
                db.dispose()

    app = FastAPI(
        title="Quiz Ranking API",
        version="0.1.0",
        lifespan=lifespan,
    )

    allowed_hosts = [h.strip() for h in settings.ALLOWED_HOSTS.split(",") if h.strip()]
    if not allowed_hosts:
        allowed_hosts = ["*"]
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=allowed_hosts)

    @app.middleware("http")
    async def security_headers_middleware(request: Request, call_next):
        response: Response = await call_next(request)
        if settings.SECURITY_HEADERS_ENABLED:
            response.headers["X-Content-Type-Options"] = "nosniff"
            response.headers["X-Frame-Options"] = "DENY"
            response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
            response.headers["Permissions-Policy"] = "camera=(), microphone=(), geolocation=()"
            response.headers["Content-Security-Policy"] = "frame-ancestors 'none'; base-uri 'self'"
            if settings.ENV != "dev":
                response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    @app.exception_handler(SQLAlchemyError)
    async def data_access_failure_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Data access failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=503, content={"detail": "Erro ao acessar o banco de dados"})

    app.include_router(router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()
