from __future__ import annotations

from django.conf import settings

from .repositories import ProductRepository, CategoryRepository
from .services import ProductService, CategoryService
from .storage import FileSystemImageStorage, default_image_directory


def build_product_service() -> ProductService:
    return ProductService(
        products=ProductRepository(),
        categories=CategoryRepository(),
        images=FileSystemImageStorage(),
        image_dir=default_image_directory(),
        default_image=getattr(settings, "CATALOG_DEFAULT_IMAGE", "default.png"),
    )


def build_category_service() -> CategoryService:
    return CategoryService(categories=CategoryRepository())
