"""
Admin authentication endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends, Response

from cafe_admin.api.dependencies import (
    get_admin_session,
    get_auth_service,
    get_session_token,
    get_settings,
)
from cafe_admin.core.config import Settings
from cafe_admin.schemas.auth import LoginRequest
from cafe_admin.services.auth_service import AdminSession, AuthService


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
async def login(
    data: LoginRequest,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings)
):
    """
    Check admin credentials and open a session

    The session cookie is only set when the credentials are valid.
    """
    _, token = await auth.login(data.username, data.password)

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.is_production,
        samesite="lax"
    )
    return {"success": True, "message": "Login successful"}


@router.post("/logout")
async def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings)
):
    auth.logout(token)
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="lax"
    )
    return {"success": True, "message": "Logged out"}


@router.get("/check")
async def check(session: Optional[AdminSession] = Depends(get_admin_session)):
    """Report who is logged in, if anyone"""
    if session:
        return {"success": True, "authenticated": True, "username": session.username}
    return {"success": True, "authenticated": False}
