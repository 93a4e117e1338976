"""
Menu endpoints (multipart for create/update)
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from cafe_admin.api.dependencies import get_menu_service, require_admin
from cafe_admin.services.auth_service import AdminSession
from cafe_admin.services.menu_service import MenuService


router = APIRouter(prefix="/menu", tags=["menu"])


@router.get("")
async def list_menu(menu: MenuService = Depends(get_menu_service)):
    """Public menu, newest first"""
    items = await menu.list()
    return {
        "success": True,
        "items": [i.model_dump(mode="json") for i in items]
    }


@router.post("")
async def create_menu_item(
    name: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    session: AdminSession = Depends(require_admin),
    menu: MenuService = Depends(get_menu_service)
):
    """
    Create a menu item

    - Accepts: JPG, PNG, GIF, WEBP image (optional)
    - The image is resized to fit 800x800
    """
    item_id = await menu.create(session, name, price, image)
    return {"success": True, "itemId": item_id}


@router.put("/{item_id}")
async def update_menu_item(
    item_id: int,
    name: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    session: AdminSession = Depends(require_admin),
    menu: MenuService = Depends(get_menu_service)
):
    await menu.update(session, item_id, name=name, price=price, image=image)
    return {"success": True, "message": "Menu item updated"}


@router.delete("/{item_id}")
async def delete_menu_item(
    item_id: int,
    session: AdminSession = Depends(require_admin),
    menu: MenuService = Depends(get_menu_service)
):
    await menu.delete(session, item_id)
    return {"success": True, "message": "Menu item deleted"}
