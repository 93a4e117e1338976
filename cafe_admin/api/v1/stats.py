from fastapi import APIRouter, Depends

from cafe_admin.api.dependencies import get_stats_service, require_admin
from cafe_admin.services.auth_service import AdminSession
from cafe_admin.services.stats_service import StatsService


router = APIRouter(tags=["stats"])


@router.get("/stats")
async def dashboard_stats(
    session: AdminSession = Depends(require_admin),
    stats: StatsService = Depends(get_stats_service)
):
    """Counts and revenue for the admin dashboard"""
    summary = await stats.summary(session)
    return {"success": True, **summary}
