"""
Persistent store shared by every service.

One Store instance is built at process start, opened by the application
lifespan and closed at shutdown. Each public operation is an awaitable that
runs a single unit of work on its own SQLAlchemy session in the threadpool.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from sqlalchemy import desc, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from starlette.concurrency import run_in_threadpool

from cafe_admin.core.database import Base, create_db_engine
from cafe_admin.core.errors import StorageError
from cafe_admin.core.security import hash_password
from cafe_admin.models import AdminUser, Contact, MenuItem, Order

logger = logging.getLogger(__name__)

T = TypeVar("T")

SAMPLE_MENU_ITEMS = [
    {"name": "Sample Coffee", "price": 120},
    {"name": "Sample Sandwich", "price": 250},
]


class Store:
    """Keyed storage for orders, contacts, menu items and admin users"""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine = None
        self.SessionLocal: Optional[sessionmaker] = None

    # ============================================
    # LIFECYCLE
    # ============================================

    @property
    def is_open(self) -> bool:
        return self.SessionLocal is not None

    def open(self, admin_username: str, admin_password: str) -> None:
        """
        Connect, create the tables and seed the defaults.

        Safe to call against an existing database: tables are created only
        when missing and seeding only happens on empty state.
        """
        self.engine = create_db_engine(self.database_url, echo=self.echo)
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False
        )

        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            logger.error(f"[Store] ❌ Could not create tables: {e}")
            raise StorageError("Could not initialize database") from e

        logger.info("[Store] ✅ Tables ready")
        self._execute(lambda session: self._seed(session, admin_username, admin_password))

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info("[Store] Connection pool disposed")
        self.engine = None
        self.SessionLocal = None

    def _seed(self, session: Session, admin_username: str, admin_password: str) -> None:
        menu_count = session.query(func.count(MenuItem.id)).scalar()
        if not menu_count:
            for item in SAMPLE_MENU_ITEMS:
                session.add(MenuItem(name=item["name"], price=item["price"], image=None))
            logger.info(f"[Store] Seeded {len(SAMPLE_MENU_ITEMS)} sample menu items")

        admin = session.query(AdminUser).filter(AdminUser.username == admin_username).first()
        if not admin:
            session.add(AdminUser(
                username=admin_username,
                password=hash_password(admin_password)
            ))
            logger.info(f"[Store] Default admin user '{admin_username}' created")

    # ============================================
    # UNIT OF WORK
    # ============================================

    def _execute(self, work: Callable[[Session], T]) -> T:
        if self.SessionLocal is None:
            raise StorageError("Store is not open")

        session = self.SessionLocal()
        try:
            result = work(session)
            session.commit()
            return result
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"[Store] ❌ DB Error: {e}")
            raise StorageError() from e
        finally:
            session.close()

    async def _run(self, work: Callable[[Session], T]) -> T:
        return await run_in_threadpool(self._execute, work)

    # ============================================
    # OPERATIONS
    # ============================================

    async def insert(self, model: Type[Base], **fields: Any) -> int:
        """Insert a record and return its generated id"""
        def work(session: Session) -> int:
            record = model(**fields)
            session.add(record)
            session.flush()
            return record.id

        return await self._run(work)

    async def all(self, model: Type[Base]) -> List[Any]:
        """All records of a collection, newest first"""
        def work(session: Session) -> List[Any]:
            return (
                session.query(model)
                .order_by(desc(model.created_at), desc(model.id))
                .all()
            )

        return await self._run(work)

    async def get(self, model: Type[Base], record_id: int) -> Optional[Any]:
        def work(session: Session) -> Optional[Any]:
            return session.query(model).filter(model.id == record_id).first()

        return await self._run(work)

    async def update(self, model: Type[Base], record_id: int, **fields: Any) -> bool:
        """
        Partial update by id.

        Returns:
            True when a row matched, False otherwise
        """
        def work(session: Session) -> bool:
            matched = (
                session.query(model)
                .filter(model.id == record_id)
                .update(fields, synchronize_session=False)
            )
            return matched > 0

        return await self._run(work)

    async def delete(self, model: Type[Base], record_id: int) -> bool:
        def work(session: Session) -> bool:
            deleted = (
                session.query(model)
                .filter(model.id == record_id)
                .delete(synchronize_session=False)
            )
            return deleted > 0

        return await self._run(work)

    async def find_admin(self, username: str) -> Optional[AdminUser]:
        def work(session: Session) -> Optional[AdminUser]:
            return session.query(AdminUser).filter(AdminUser.username == username).first()

        return await self._run(work)

    async def dashboard_stats(self) -> Dict[str, Any]:
        """Counts and revenue across orders and contacts"""
        def work(session: Session) -> Dict[str, Any]:
            # created_at is stored in UTC
            today_start = datetime.now(timezone.utc).replace(
                hour=0, minute=0, second=0, microsecond=0, tzinfo=None
            )
            revenue = session.query(func.sum(Order.total)).scalar()

            return {
                "total_contacts": session.query(func.count(Contact.id)).scalar() or 0,
                "total_orders": session.query(func.count(Order.id)).scalar() or 0,
                "total_revenue": float(revenue or 0),
                "today_orders": session.query(func.count(Order.id)).filter(
                    Order.created_at >= today_start
                ).scalar() or 0,
                "pending_orders": session.query(func.count(Order.id)).filter(
                    Order.status == "pending"
                ).scalar() or 0,
                "completed_orders": session.query(func.count(Order.id)).filter(
                    Order.status == "completed"
                ).scalar() or 0,
            }

        return await self._run(work)
