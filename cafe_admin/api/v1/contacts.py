"""
Contact form endpoints
"""
from fastapi import APIRouter, Depends

from cafe_admin.api.dependencies import get_contact_service, require_admin
from cafe_admin.schemas.contact import ContactCreate
from cafe_admin.services.auth_service import AdminSession
from cafe_admin.services.contact_service import ContactService


router = APIRouter(tags=["contacts"])


@router.post("/contact")
async def submit_contact(
    data: ContactCreate,
    contacts: ContactService = Depends(get_contact_service)
):
    await contacts.submit(
        name=data.name,
        email=data.email,
        message=data.message,
        phone=data.phone,
        subject=data.subject
    )
    return {"success": True, "message": "Thank you for contacting us!"}


@router.get("/contacts")
async def list_contacts(
    session: AdminSession = Depends(require_admin),
    contacts: ContactService = Depends(get_contact_service)
):
    result = await contacts.list(session)
    return {
        "success": True,
        "contacts": [c.model_dump(mode="json") for c in result]
    }


@router.put("/contacts/{contact_id}/read")
async def mark_contact_read(
    contact_id: int,
    session: AdminSession = Depends(require_admin),
    contacts: ContactService = Depends(get_contact_service)
):
    await contacts.mark_read(session, contact_id)
    return {"success": True, "message": "Contact marked as read"}


@router.delete("/contacts/{contact_id}")
async def delete_contact(
    contact_id: int,
    session: AdminSession = Depends(require_admin),
    contacts: ContactService = Depends(get_contact_service)
):
    await contacts.delete(session, contact_id)
    return {"success": True, "message": "Contact deleted"}
