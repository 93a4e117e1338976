"""
Cafe Admin - ordering and admin-management backend
Main Application Entry Point
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from cafe_admin.core.config import Settings, get_settings
from cafe_admin.core.errors import CafeError, Unauthorized
from cafe_admin.core.store import Store
from cafe_admin.services.auth_service import SessionManager
from cafe_admin.services.upload_service import UploadService

# ========================================
# API ROUTERS
# ========================================
from cafe_admin.api import pages
from cafe_admin.api.dependencies import is_anonymous_admin_call, requires_admin
from cafe_admin.api.v1 import auth, contacts, menu, orders, stats

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def _log_routes(app: FastAPI) -> None:
    routes_api = []
    for route in app.routes:
        if hasattr(route, 'methods') and hasattr(route, 'path') and route.path.startswith('/api/'):
            methods = ', '.join(sorted(route.methods - {'HEAD', 'OPTIONS'}))
            if methods:
                routes_api.append(f"  {methods:8} {route.path}")

    logger.info("API routes:\n" + "\n".join(sorted(set(routes_api))))


def _error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, **extra}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Every failure leaves as {success: false, message}"""

    @app.exception_handler(CafeError)
    async def cafe_error_handler(request: Request, exc: CafeError):
        if exc.status_code >= 500:
            logger.error(f"[API] {request.method} {request.url.path}: {exc.message}")
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        if is_anonymous_admin_call(request):
            return _error_response(Unauthorized.status_code, Unauthorized.default_message)
        errors = [
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        ]
        return _error_response(400, "Invalid request", errors=errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if is_anonymous_admin_call(request):
            return _error_response(Unauthorized.status_code, Unauthorized.default_message)
        return _error_response(exc.status_code, str(exc.detail))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    # ========================================
    # LIFESPAN EVENT
    # ========================================
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ===== STARTUP =====
        app.state.uploads = UploadService(
            settings.UPLOAD_FOLDER,
            max_file_size=settings.MAX_UPLOAD_SIZE,
            allowed_extensions=settings.ALLOWED_EXTENSIONS
        )
        app.state.store.open(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)

        logger.info(f"🍔 {settings.PROJECT_NAME} started ({settings.ENVIRONMENT})")
        _log_routes(app)

        yield

        # ===== SHUTDOWN =====
        app.state.store.close()
        logger.info("👋 Server stopped")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan
    )

    # Shared resources; the store is opened by the lifespan
    app.state.settings = settings
    app.state.store = Store(settings.DATABASE_URL, echo=settings.DEBUG)
    app.state.sessions = SessionManager(
        settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        max_age_seconds=settings.SESSION_MAX_AGE_SECONDS
    )

    # ========================================
    # MIDDLEWARE - CORS
    # ========================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # ========================================
    # ROUTERS API (prefix /api)
    # ========================================
    app.include_router(auth.router, prefix="/api")
    app.include_router(orders.router, prefix="/api")
    app.include_router(contacts.router, prefix="/api")
    app.include_router(menu.router, prefix="/api")
    app.include_router(stats.router, prefix="/api")

    # ========================================
    # STATIC FILES
    # ========================================
    # The folder is created by UploadService at startup
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.UPLOAD_FOLDER, check_dir=False),
        name="uploads"
    )

    # Pages last: it ends with the catch-all landing route
    app.include_router(pages.router)

    # Endpoints behind require_admin, checked by the error handlers
    app.state.admin_endpoints = {
        route.endpoint
        for route in app.routes
        if isinstance(route, APIRoute) and requires_admin(route.dependant)
    }

    return app


app = create_app()
