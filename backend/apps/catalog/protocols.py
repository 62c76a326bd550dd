from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, TYPE_CHECKING

from apps.common.pagination import Page, PageRequest

if TYPE_CHECKING:
    from apps.catalog.models import Category, Product


class CategoryRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Category"]: ...

    def exists(self, **filters) -> bool: ...

    def page(self, page_request: PageRequest, **filters) -> Page["Category"]: ...

    def create(self, **data) -> "Category": ...

    def update(self, category: "Category", **data) -> "Category": ...

    def delete_with_products(self, category: "Category") -> int: ...


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Product"]: ...

    def exists(self, **filters) -> bool: ...

    def page(self, page_request: PageRequest, **filters) -> Page["Product"]: ...

    def page_by_category(
        self, category: "Category", page_request: PageRequest
    ) -> Page["Product"]: ...

    def page_by_name_containing(
        self, keyword: str, page_request: PageRequest
    ) -> Page["Product"]: ...

    def create(self, **data) -> "Product": ...

    def update(self, product: "Product", **data) -> "Product": ...

    def delete(self, product: "Product") -> None: ...


class ImageStorageProtocol(Protocol):
    def store(self, directory: str, upload: Any) -> str: ...

    def discard(self, directory: str, file_name: str) -> None: ...


class UploadProtocol(Protocol):
    name: str

    def chunks(self, chunk_size: Optional[int] = None) -> Iterable[bytes]: ...
