from __future__ import annotations

from typing import Any, Dict, Optional, Union

from apps.common import get_logger
from .commands import CategoryCommand, ProductCommand
from .dtos import CategoryDeletionDTO, CategoryDTO, PageDTO, ProductDTO
from .exceptions import (
    EmptyResult,
    ResourceConflict,
    ResourceNotFound,
    translate_storage_errors,
)
from .mappers import CategoryMapper, ProductMapper
from .models import Category, Product
from .pagination import (
    CATEGORY_SORT_FIELDS,
    DEFAULT_CATEGORY_SORT,
    DEFAULT_PRODUCT_SORT,
    PRODUCT_SORT_FIELDS,
    build_page_request,
)
from .protocols import (
    CategoryRepositoryProtocol,
    ImageStorageProtocol,
    ProductRepositoryProtocol,
)

logger = get_logger(__name__).bind(component="catalog", layer="service")


class CategoryService:
    def __init__(self, categories: CategoryRepositoryProtocol):
        self.categories = categories
        self.logger = logger.bind(service="CategoryService")

    def _require(self, category_id: int) -> Category:
        category: Optional[Category] = self.categories.get(id=category_id)
        if not category:
            self.logger.warning("Category not found", category_id=category_id)
            raise ResourceNotFound("Category", "categoryId", category_id)
        return category

    @translate_storage_errors
    def list_categories(
        self,
        page_number: Any = None,
        page_size: Any = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> PageDTO[CategoryDTO]:
        page_request = build_page_request(
            page_number,
            page_size,
            sort_by,
            sort_order,
            fields=CATEGORY_SORT_FIELDS,
            default_sort=DEFAULT_CATEGORY_SORT,
        )
        self.logger.debug(
            "Listing categories",
            page=page_request.page_number,
            size=page_request.page_size,
            ordering=page_request.ordering,
        )
        page = self.categories.page(page_request)
        if page.total_elements == 0:
            self.logger.info("No categories found")
            raise EmptyResult("No categories found")
        return CategoryMapper.to_page_dto(page)

    @translate_storage_errors
    def get_category(self, category_id: int) -> CategoryDTO:
        self.logger.debug("Fetching category", category_id=category_id)
        return CategoryMapper.to_dto(self._require(category_id))

    @translate_storage_errors
    def create_category(
        self, data: Union[Dict[str, Any], CategoryCommand]
    ) -> CategoryDTO:
        cmd = data if isinstance(data, CategoryCommand) else CategoryCommand.from_raw(data)
        self.logger.info("Creating category", name=cmd.name)
        if self.categories.get(name=cmd.name) is not None:
            self.logger.warning("Category create rejected: duplicate name", name=cmd.name)
            raise ResourceConflict(
                f"Category with name '{cmd.name}' already exists",
                {"categoryName": cmd.name},
            )
        category: Category = self.categories.create(name=cmd.name)
        self.logger.info("Category created", category_id=category.id)
        return CategoryMapper.to_dto(category)

    @translate_storage_errors
    def update_category(
        self, category_id: int, data: Union[Dict[str, Any], CategoryCommand]
    ) -> CategoryDTO:
        self.logger.info("Updating category", category_id=category_id)
        category = self._require(category_id)
        cmd = data if isinstance(data, CategoryCommand) else CategoryCommand.from_raw(data)
        clash: Optional[Category] = self.categories.get(name=cmd.name)
        if clash is not None and clash.id != category.id:
            self.logger.warning(
                "Category update rejected: duplicate name",
                category_id=category_id,
                name=cmd.name,
            )
            raise ResourceConflict(
                f"Category with name '{cmd.name}' already exists",
                {"categoryName": cmd.name},
            )
        self.categories.update(category, name=cmd.name)
        self.logger.info("Category updated", category_id=category_id)
        return CategoryMapper.to_dto(category)

    @translate_storage_errors
    def delete_category(self, category_id: int) -> CategoryDeletionDTO:
        self.logger.info("Deleting category", category_id=category_id)
        category = self._require(category_id)
        removed = self.categories.delete_with_products(category)
        self.logger.info(
            "Category deleted", category_id=category_id, products_removed=removed
        )
        return CategoryDeletionDTO(category_id=category_id)


class ProductService:
    def __init__(
        self,
        products: ProductRepositoryProtocol,
        categories: CategoryRepositoryProtocol,
        images: ImageStorageProtocol,
        *,
        image_dir: str,
        default_image: str = "default.png",
    ):
        self.products = products
        self.categories = categories
        self.images = images
        self.image_dir = image_dir
        self.default_image = default_image
        self.logger = logger.bind(service="ProductService")

    def _require(self, product_id: int) -> Product:
        product: Optional[Product] = self.products.get(id=product_id)
        if not product:
            self.logger.warning("Product not found", product_id=product_id)
            raise ResourceNotFound("Product", "productId", product_id)
        return product

    def _require_category(self, category_id: int) -> Category:
        category: Optional[Category] = self.categories.get(id=category_id)
        if not category:
            self.logger.warning("Category not found", category_id=category_id)
            raise ResourceNotFound("Category", "categoryId", category_id)
        return category

    def _page_request(self, page_number, page_size, sort_by, sort_order, base_ordering=()):
        return build_page_request(
            page_number,
            page_size,
            sort_by,
            sort_order,
            fields=PRODUCT_SORT_FIELDS,
            default_sort=DEFAULT_PRODUCT_SORT,
            base_ordering=base_ordering,
        )

    @translate_storage_errors
    def add_product(
        self, category_id: int, data: Union[Dict[str, Any], ProductCommand]
    ) -> ProductDTO:
        category = self._require_category(category_id)
        cmd = data if isinstance(data, ProductCommand) else ProductCommand.from_raw(data)
        self.logger.info("Creating product", name=cmd.name, category_id=category_id)
        if self.products.get(name=cmd.name) is not None:
            self.logger.warning("Product create rejected: duplicate name", name=cmd.name)
            raise ResourceConflict(
                f"Product with name {cmd.name} already exists.",
                {"productName": cmd.name},
            )
        product: Product = self.products.create(
            **cmd.as_fields(), image=self.default_image, category=category
        )
        self.logger.info("Product created", product_id=product.id)
        return ProductMapper.to_dto(product)

    @translate_storage_errors
    def get_product(self, product_id: int) -> ProductDTO:
        self.logger.debug("Fetching product", product_id=product_id)
        return ProductMapper.to_dto(self._require(product_id))

    @translate_storage_errors
    def get_all_products(
        self,
        page_number: Any = None,
        page_size: Any = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> PageDTO[ProductDTO]:
        page_request = self._page_request(page_number, page_size, sort_by, sort_order)
        self.logger.debug(
            "Listing products",
            page=page_request.page_number,
            size=page_request.page_size,
            ordering=page_request.ordering,
        )
        page = self.products.page(page_request)
        if page.total_elements == 0:
            self.logger.info("No products found")
            raise EmptyResult("No products found")
        return ProductMapper.to_page_dto(page)

    @translate_storage_errors
    def search_by_category(
        self,
        category_id: int,
        page_number: Any = None,
        page_size: Any = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> PageDTO[ProductDTO]:
        category = self._require_category(category_id)
        page_request = self._page_request(
            page_number, page_size, sort_by, sort_order, base_ordering=("price",)
        )
        self.logger.debug(
            "Listing products by category",
            category_id=category_id,
            ordering=page_request.ordering,
        )
        page = self.products.page_by_category(category, page_request)
        if page.total_elements == 0:
            self.logger.info("Category has no products", category_id=category_id)
            raise EmptyResult(
                f"{category.name} category does not have any products",
                {"categoryId": str(category_id)},
            )
        return ProductMapper.to_page_dto(page)

    @translate_storage_errors
    def search_by_keyword(
        self,
        keyword: str,
        page_number: Any = None,
        page_size: Any = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> PageDTO[ProductDTO]:
        keyword = keyword or ""
        page_request = self._page_request(page_number, page_size, sort_by, sort_order)
        self.logger.debug("Searching products", keyword=keyword)
        page = self.products.page_by_name_containing(keyword, page_request)
        if page.total_elements == 0:
            self.logger.info("No products match keyword", keyword=keyword)
            raise EmptyResult(
                f"Products not found with keyword: {keyword}", {"keyword": keyword}
            )
        return ProductMapper.to_page_dto(page)

    @translate_storage_errors
    def update_product(
        self, product_id: int, data: Union[Dict[str, Any], ProductCommand]
    ) -> ProductDTO:
        self.logger.info("Updating product", product_id=product_id)
        product = self._require(product_id)
        cmd = data if isinstance(data, ProductCommand) else ProductCommand.from_raw(data)
        clash: Optional[Product] = self.products.get(name=cmd.name)
        if clash is not None and clash.id != product.id:
            self.logger.warning(
                "Product update rejected: duplicate name",
                product_id=product_id,
                name=cmd.name,
            )
            raise ResourceConflict(
                f"Product with name {cmd.name} already exists.",
                {"productName": cmd.name},
            )
        self.products.update(product, **cmd.as_fields())
        self.logger.info("Product updated", product_id=product_id)
        return ProductMapper.to_dto(product)

    @translate_storage_errors
    def delete_product(self, product_id: int) -> ProductDTO:
        self.logger.info("Deleting product", product_id=product_id)
        product = self._require(product_id)
        dto = ProductMapper.to_dto(product)
        self.products.delete(product)
        self.logger.info("Product deleted", product_id=product_id)
        return dto

    @translate_storage_errors
    def update_product_image(self, product_id: int, upload: Any) -> ProductDTO:
        """
        Store ``upload`` as the product's image.

        The file is written before the product row; a failed file write leaves
        the product untouched, and a failed row write discards the new file.
        """
        self.logger.info("Updating product image", product_id=product_id)
        product = self._require(product_id)
        file_name = self.images.store(self.image_dir, upload)
        previous = product.image
        try:
            self.products.update(product, image=file_name)
        except Exception:
            product.image = previous
            self.images.discard(self.image_dir, file_name)
            raise
        self.logger.info("Product image updated", product_id=product_id, image=file_name)
        return ProductMapper.to_dto(product)
