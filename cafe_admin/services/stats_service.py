from typing import Any, Dict

from cafe_admin.core.store import Store
from cafe_admin.services.auth_service import AdminSession, ensure_admin


class StatsService:
    """Dashboard figures"""

    def __init__(self, store: Store):
        self.store = store

    async def summary(self, session: AdminSession) -> Dict[str, Any]:
        ensure_admin(session)
        return await self.store.dashboard_stats()
