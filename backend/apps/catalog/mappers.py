from typing import Iterable, List, Optional

from apps.common.pagination import Page

from .dtos import CategoryDTO, PageDTO, ProductDTO
from .models import Category, Product


def _to_page_dto(page: Page, content: list) -> PageDTO:
    return PageDTO(
        content=content,
        page_number=page.page_number,
        page_size=page.page_size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        is_last_page=page.is_last,
    )


class CategoryMapper:
    @staticmethod
    def to_dto(cat: Category) -> CategoryDTO:
        return CategoryDTO(id=cat.id, name=cat.name)

    @staticmethod
    def many_to_dto(categories: Iterable[Category]) -> List[CategoryDTO]:
        return [CategoryMapper.to_dto(c) for c in categories]

    @staticmethod
    def to_page_dto(page: Page[Category]) -> PageDTO[CategoryDTO]:
        return _to_page_dto(page, CategoryMapper.many_to_dto(page.items))


class ProductMapper:
    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        category: Optional[Category] = getattr(product, "category", None)
        return ProductDTO(
            id=product.id,
            name=product.name,
            image=product.image,
            description=product.description or "",
            quantity=int(product.quantity or 0),
            price=float(product.price),
            discount=float(product.discount),
            special_price=float(product.special_price),
            category=CategoryMapper.to_dto(category) if category is not None else None,
        )

    @staticmethod
    def many_to_dto(products: Iterable[Product]) -> List[ProductDTO]:
        return [ProductMapper.to_dto(p) for p in products]

    @staticmethod
    def to_page_dto(page: Page[Product]) -> PageDTO[ProductDTO]:
        return _to_page_dto(page, ProductMapper.many_to_dto(page.items))
