"""
Request dependencies: shared resources from app.state and admin sessions
"""
from typing import Optional

from fastapi import Depends, Request

from cafe_admin.core.config import Settings
from cafe_admin.core.errors import Unauthorized
from cafe_admin.core.store import Store
from cafe_admin.services.auth_service import AdminSession, AuthService, SessionManager
from cafe_admin.services.contact_service import ContactService
from cafe_admin.services.menu_service import MenuService
from cafe_admin.services.order_service import OrderService
from cafe_admin.services.stats_service import StatsService
from cafe_admin.services.upload_service import UploadService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.sessions


def get_upload_service(request: Request) -> UploadService:
    return request.app.state.uploads


def get_session_token(
    request: Request,
    settings: Settings = Depends(get_settings)
) -> Optional[str]:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_admin_session(
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionManager = Depends(get_session_manager)
) -> Optional[AdminSession]:
    """Resolve the cookie to a live session, None when absent or expired"""
    return sessions.resolve(token)


def require_admin(
    session: Optional[AdminSession] = Depends(get_admin_session)
) -> AdminSession:
    """Gate for admin-only endpoints; runs before the handler body"""
    if session is None:
        raise Unauthorized()
    return session


# ============================================
# SERVICES
# ============================================

def get_auth_service(
    store: Store = Depends(get_store),
    sessions: SessionManager = Depends(get_session_manager)
) -> AuthService:
    return AuthService(store, sessions)


def get_order_service(store: Store = Depends(get_store)) -> OrderService:
    return OrderService(store)


def get_contact_service(store: Store = Depends(get_store)) -> ContactService:
    return ContactService(store)


def get_menu_service(
    store: Store = Depends(get_store),
    uploads: UploadService = Depends(get_upload_service)
) -> MenuService:
    return MenuService(store, uploads)


def get_stats_service(store: Store = Depends(get_store)) -> StatsService:
    return StatsService(store)


def requires_admin(dependant) -> bool:
    """Whether an endpoint's dependency tree includes the admin gate"""
    return any(
        d.call is require_admin or requires_admin(d)
        for d in dependant.dependencies
    )


def is_anonymous_admin_call(request: Request) -> bool:
    """
    True for a request to an admin endpoint without a live session.

    FastAPI parses the body before dependencies run, so request errors raised
    for such calls must still answer as Unauthorized.
    """
    endpoint = request.scope.get("endpoint")
    if endpoint is None or endpoint not in getattr(request.app.state, "admin_endpoints", ()):
        return False

    settings = request.app.state.settings
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    return request.app.state.sessions.resolve(token) is None
