from django.db import transaction

from apps.common.pagination import Page, PageRequest
from apps.common.repository import GenericRepository
from .models import Category, Product


class CategoryRepository(GenericRepository[Category]):
    def __init__(self):
        super().__init__(Category)

    def delete_with_products(self, category: Category) -> int:
        """
        Delete the category together with every product filed under it.
        Returns the number of products removed.
        """
        with transaction.atomic():
            removed, _ = Product.objects.filter(category=category).delete()
            category.delete()
        return removed


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def list(self, **filters):  # type: ignore[override]
        """Return products with their category joined to avoid N+1 during DTO mapping."""
        return self.model.objects.filter(**filters).select_related("category")

    def page_by_category(self, category: Category, page_request: PageRequest) -> Page[Product]:
        return self.page(page_request, category=category)

    def page_by_name_containing(self, keyword: str, page_request: PageRequest) -> Page[Product]:
        return self.page(page_request, name__icontains=keyword)
