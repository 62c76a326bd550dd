import os
import uuid
from typing import Optional

from django.conf import settings
from django.core.files.base import ContentFile, File
from django.core.files.storage import FileSystemStorage

from apps.common import get_logger

from .exceptions import CatalogValidationError, ImageStorageFailure
from .protocols import UploadProtocol

logger = get_logger(__name__).bind(component="catalog", layer="storage")


class FileSystemImageStorage:
    """
    Stores product images on local disk through Django's ``FileSystemStorage``.

    Each upload is written under ``<uuid4><original extension>`` so names never
    collide; the target directory is created on first write.
    """

    def __init__(self, file_permissions_mode: Optional[int] = None):
        self.file_permissions_mode = file_permissions_mode
        self.logger = logger.bind(storage="FileSystemImageStorage")

    def _storage(self, directory: str) -> FileSystemStorage:
        return FileSystemStorage(
            location=directory,
            file_permissions_mode=self.file_permissions_mode,
        )

    @staticmethod
    def generate_name(original_name: str) -> str:
        extension = os.path.splitext(os.path.basename(original_name or ""))[1]
        if not extension:
            raise CatalogValidationError(
                {"image": "Image file name must include an extension"}
            )
        return f"{uuid.uuid4()}{extension.lower()}"

    def store(self, directory: str, upload: UploadProtocol) -> str:
        file_name = self.generate_name(getattr(upload, "name", ""))
        content = upload if isinstance(upload, File) else ContentFile(upload.read())
        self.logger.debug("Storing image", directory=directory, file_name=file_name)
        try:
            stored = self._storage(directory).save(file_name, content)
        except OSError as exc:
            self.logger.error(
                "Image write failed", directory=directory, file_name=file_name, error=str(exc)
            )
            raise ImageStorageFailure() from exc
        self.logger.info("Image stored", directory=directory, file_name=stored)
        return stored

    def discard(self, directory: str, file_name: str) -> None:
        try:
            self._storage(directory).delete(file_name)
        except OSError as exc:
            self.logger.warning(
                "Image discard failed", directory=directory, file_name=file_name, error=str(exc)
            )
            return
        self.logger.info("Image discarded", directory=directory, file_name=file_name)


def default_image_directory() -> str:
    return str(getattr(settings, "CATALOG_IMAGE_DIR", settings.BASE_DIR / "images"))
