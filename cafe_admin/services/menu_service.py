"""
Menu management: public listing, admin create/update/delete
"""
import logging
import math
from typing import Any, List, Optional

from fastapi import UploadFile

from cafe_admin.core.errors import NotFound, StorageError, ValidationError
from cafe_admin.core.store import Store
from cafe_admin.models.menu_item import MenuItem
from cafe_admin.schemas.menu import MenuItemResponse
from cafe_admin.services.auth_service import AdminSession, ensure_admin
from cafe_admin.services.upload_service import UploadService

logger = logging.getLogger(__name__)


def parse_price(value: Any) -> float:
    """Form fields arrive as text"""
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid price")

    if not math.isfinite(price) or price < 0:
        raise ValidationError("Invalid price")
    return price


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class MenuService:
    def __init__(self, store: Store, uploads: UploadService):
        self.store = store
        self.uploads = uploads

    async def list(self) -> List[MenuItemResponse]:
        items = await self.store.all(MenuItem)
        return [MenuItemResponse.model_validate(i) for i in items]

    async def create(
        self,
        session: AdminSession,
        name: Optional[str],
        price: Any,
        image: Optional[UploadFile] = None
    ) -> int:
        ensure_admin(session)

        if _is_blank(name) or _is_blank(price):
            raise ValidationError("Name and price required")

        parsed_price = parse_price(price)

        image_url = None
        uploaded_path = None
        if self.uploads.has_file(image):
            result = await self.uploads.upload_menu_image(image)
            image_url = result['url']
            uploaded_path = result['filepath']

        try:
            item_id = await self.store.insert(
                MenuItem,
                name=name.strip(),
                price=parsed_price,
                image=image_url
            )
        except StorageError:
            self.uploads.delete_file(uploaded_path)
            raise

        logger.info(f"[Menu] ✅ Item created: {name} (ID: {item_id})")
        return item_id

    async def update(
        self,
        session: AdminSession,
        item_id: int,
        name: Optional[str] = None,
        price: Any = None,
        image: Optional[UploadFile] = None
    ) -> None:
        """
        Change only the supplied fields.

        A new image replaces the previous uploaded file.
        """
        ensure_admin(session)

        fields = {}
        if not _is_blank(name):
            fields["name"] = name.strip()
        if not _is_blank(price):
            fields["price"] = parse_price(price)

        has_image = self.uploads.has_file(image)
        if not fields and not has_image:
            raise ValidationError("Nothing to update")

        existing = await self.store.get(MenuItem, item_id)
        if not existing:
            raise NotFound("Menu item not found")

        uploaded_path = None
        if has_image:
            result = await self.uploads.upload_menu_image(image)
            fields["image"] = result['url']
            uploaded_path = result['filepath']

        try:
            updated = await self.store.update(MenuItem, item_id, **fields)
        except StorageError:
            self.uploads.delete_file(uploaded_path)
            raise

        if not updated:
            # Deleted between the read and the write
            self.uploads.delete_file(uploaded_path)
            raise NotFound("Menu item not found")

        if has_image:
            self.uploads.delete_file(self.uploads.path_for_url(existing.image))

        logger.info(f"[Menu] Item {item_id} updated: {', '.join(sorted(fields))}")

    async def delete(self, session: AdminSession, item_id: int) -> None:
        ensure_admin(session)

        existing = await self.store.get(MenuItem, item_id)
        if not existing:
            return

        if await self.store.delete(MenuItem, item_id):
            self.uploads.delete_file(self.uploads.path_for_url(existing.image))
            logger.info(f"[Menu] Item {item_id} deleted")
