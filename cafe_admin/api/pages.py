"""
HTML pages: admin login/dashboard and the public landing fallback
"""
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from cafe_admin.api.dependencies import get_admin_session, get_settings
from cafe_admin.core.config import Settings
from cafe_admin.services.auth_service import AdminSession

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(include_in_schema=False)


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    return {"status": "healthy", "app": settings.APP_NAME}


@router.get("/admin/login", response_class=HTMLResponse)
async def admin_login_page(
    request: Request,
    session: Optional[AdminSession] = Depends(get_admin_session),
    settings: Settings = Depends(get_settings)
):
    """Login form; logged-in admins go straight to the dashboard"""
    if session:
        return RedirectResponse(url="/admin/dashboard", status_code=302)
    return templates.TemplateResponse(
        request, "admin/login.html", {"project_name": settings.PROJECT_NAME}
    )


@router.get("/admin/dashboard", response_class=HTMLResponse)
async def admin_dashboard_page(
    request: Request,
    session: Optional[AdminSession] = Depends(get_admin_session),
    settings: Settings = Depends(get_settings)
):
    if not session:
        return RedirectResponse(url="/admin/login", status_code=302)
    return templates.TemplateResponse(
        request,
        "admin/dashboard.html",
        {"project_name": settings.PROJECT_NAME, "username": session.username}
    )


# Registered last: anything unmatched gets the landing page
@router.get("/{full_path:path}", response_class=HTMLResponse)
async def landing(
    request: Request,
    full_path: str,
    settings: Settings = Depends(get_settings)
):
    return templates.TemplateResponse(
        request, "index.html", {"project_name": settings.PROJECT_NAME}
    )
