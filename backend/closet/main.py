"""Main FastAPI application."""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from closet.api.admin import router as admin_router
from closet.api.market import router as market_router
from closet.api.social import router as social_router
from closet.domain.common.errors import AuthenticationError, DomainError
from closet.domain.common.types import utcnow
from closet.infra.db.seed import seed_demo_data
from closet.infra.db.session import Database
from closet.settings import settings

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    if settings.seed_demo_data and app.state.db.users.count() == 0:
        seed_demo_data(app.state.db)

    yield

    logger.info("Shutting down")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all requests and responses."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        logger.info(f"[REQUEST] {request.method} {request.url.path}")

        if request.headers:
            # Never log a full bearer token
            headers = dict(request.headers)
            auth_header = headers.get("authorization", "")
            if auth_header.startswith("Bearer "):
                token = auth_header[7:]
                headers["authorization"] = f"Bearer {token[:10]}..." if len(token) > 10 else "Bearer ***"
            logger.debug(f"   Headers: {headers}")
        logger.debug(f"   Query params: {dict(request.query_params)}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"[RESPONSE] {request.method} {request.url.path} - {response.status_code} ({process_time:.3f}s)"
        )
        return response


async def domain_error_handler(request: Request, exc: DomainError):
    """Map domain errors to their HTTP status with an ``error`` body."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    if exc.status_code >= 500:
        logger.error(f"[ERROR] {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or incomplete input is a 400."""
    errors = jsonable_encoder(exc.errors())
    logger.warning(f"[VALIDATION ERROR] {request.method} {request.url.path}: {len(errors)} error(s)")
    return JSONResponse(status_code=400, content={"error": "Invalid request", "details": errors})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return JSONResponse(status_code=404, content={"error": "Endpoint not found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc) or "Internal server error"})


def create_app(db: Optional[Database] = None) -> FastAPI:
    """Build the application around a store (a fresh one unless given)."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.db = db if db is not None else Database()
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added after CORS so CORS stays the outermost layer
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/", tags=["meta"])
    async def root():
        """Service metadata."""
        return {
            "message": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "endpoints": {
                "auth": "/api/auth/*",
                "users": "/api/users/*",
                "dresses": "/api/dresses/*",
                "transactions": "/api/transactions/*",
                "favorites": "/api/favorites/*",
                "messages": "/api/messages/*",
                "stats": "/api/stats",
            },
        }

    @app.get("/api/health", tags=["meta"])
    async def health_check(request: Request):
        """Liveness plus store sizes."""
        return {
            "status": "healthy",
            "uptime": round(time.monotonic() - request.app.state.started_at, 3),
            "timestamp": utcnow().isoformat(),
            "database": request.app.state.db.sizes(),
        }

    app.include_router(admin_router, prefix="/api")
    app.include_router(market_router, prefix="/api")
    app.include_router(social_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("closet.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
