"""
File handling for menu item images
"""
import io
import logging
import os
import uuid
from typing import Iterable, Optional

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from cafe_admin.core.errors import ValidationError

logger = logging.getLogger(__name__)


class UploadService:
    """Validates, optimizes and stores uploaded images"""

    PUBLIC_PREFIX = "/uploads"

    def __init__(
        self,
        upload_dir: str,
        max_file_size: int = 5 * 1024 * 1024,
        allowed_extensions: Optional[Iterable[str]] = None
    ):
        self.upload_dir = upload_dir
        self.menu_dir = os.path.join(upload_dir, "menu")
        self.max_file_size = max_file_size
        self.allowed_extensions = {
            e.lower() for e in (allowed_extensions or ("jpg", "jpeg", "png", "gif", "webp"))
        }

        os.makedirs(self.menu_dir, exist_ok=True)

    @staticmethod
    def has_file(file: Optional[UploadFile]) -> bool:
        """Browsers post an empty part when no file was picked"""
        return file is not None and bool(file.filename)

    def _validate_file(self, file: UploadFile) -> None:
        if not file.filename:
            raise ValidationError("Invalid file name")

        extension = file.filename.rsplit('.', 1)[-1].lower()
        if extension not in self.allowed_extensions:
            raise ValidationError(
                f"File type not allowed. Use: {', '.join(sorted(self.allowed_extensions))}"
            )

        if not file.content_type or not file.content_type.startswith('image/'):
            raise ValidationError("The file must be an image")

    def _optimize_image(self, file_content: bytes, max_size: tuple = (800, 800)) -> bytes:
        """Resize keeping the aspect ratio and re-encode as JPEG"""
        try:
            image = Image.open(io.BytesIO(file_content))

            # Flatten transparency onto white
            if image.mode in ('RGBA', 'LA', 'P'):
                if image.mode != 'RGBA':
                    image = image.convert('RGBA')
                background = Image.new('RGB', image.size, (255, 255, 255))
                background.paste(image, mask=image.split()[-1])
                image = background
            elif image.mode != 'RGB':
                image = image.convert('RGB')

            image.thumbnail(max_size, Image.Resampling.LANCZOS)

            output = io.BytesIO()
            image.save(output, format='JPEG', quality=85, optimize=True)
            return output.getvalue()

        except (UnidentifiedImageError, OSError) as e:
            raise ValidationError(f"Could not process image: {e}") from e

    async def upload_menu_image(self, file: UploadFile) -> dict:
        """
        Store the image of a menu item

        Returns:
            {
                'filename': str,
                'filepath': str,
                'url': str,
                'size': int
            }
        """
        self._validate_file(file)

        content = await file.read()

        if len(content) > self.max_file_size:
            raise ValidationError(
                f"File too large. Maximum: {self.max_file_size / (1024 * 1024):.0f}MB"
            )

        optimized_content = self._optimize_image(content, max_size=(800, 800))

        # UUID avoids collisions between uploads with the same name
        filename = f"menu_{uuid.uuid4().hex[:12]}.jpg"
        filepath = os.path.join(self.menu_dir, filename)

        with open(filepath, 'wb') as f:
            f.write(optimized_content)

        logger.info(f"[Uploads] Saved {filename} ({len(optimized_content)} bytes)")

        return {
            'filename': filename,
            'filepath': filepath,
            'url': f"{self.PUBLIC_PREFIX}/menu/{filename}",
            'size': len(optimized_content)
        }

    def path_for_url(self, url: Optional[str]) -> Optional[str]:
        """Local path of a file previously returned by upload_menu_image"""
        prefix = f"{self.PUBLIC_PREFIX}/menu/"
        if not url or not url.startswith(prefix):
            return None

        filename = os.path.basename(url[len(prefix):])
        if not filename:
            return None
        return os.path.join(self.menu_dir, filename)

    def delete_file(self, filepath: Optional[str]) -> bool:
        """Remove a stored file; missing files are not an error"""
        if not filepath or not os.path.exists(filepath):
            return False

        try:
            os.remove(filepath)
            return True
        except OSError as e:
            logger.warning(f"[Uploads] Could not delete {filepath}: {e}")
            return False
