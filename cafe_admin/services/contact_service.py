"""
Contact messages sent from the public site
"""
import logging
from typing import List, Optional

from cafe_admin.core.errors import ValidationError
from cafe_admin.core.store import Store
from cafe_admin.models.contact import Contact
from cafe_admin.schemas.contact import ContactResponse
from cafe_admin.services.auth_service import AdminSession, ensure_admin

logger = logging.getLogger(__name__)


class ContactService:
    def __init__(self, store: Store):
        self.store = store

    async def submit(
        self,
        name: Optional[str],
        email: Optional[str],
        message: Optional[str],
        phone: Optional[str] = None,
        subject: Optional[str] = None
    ) -> int:
        if not name or not email or not message:
            raise ValidationError("Missing required fields")

        contact_id = await self.store.insert(
            Contact,
            name=name,
            phone=phone or "",
            email=email,
            subject=subject or "",
            message=message,
            is_read=False
        )

        logger.info(f"[Contacts] New message from {email} (ID {contact_id})")
        return contact_id

    async def list(self, session: AdminSession) -> List[ContactResponse]:
        ensure_admin(session)
        contacts = await self.store.all(Contact)
        return [ContactResponse.model_validate(c) for c in contacts]

    async def mark_read(self, session: AdminSession, contact_id: int) -> None:
        ensure_admin(session)
        await self.store.update(Contact, contact_id, is_read=True)

    async def delete(self, session: AdminSession, contact_id: int) -> None:
        ensure_admin(session)
        if await self.store.delete(Contact, contact_id):
            logger.info(f"[Contacts] Message {contact_id} deleted")
