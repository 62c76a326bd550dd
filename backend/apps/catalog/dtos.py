from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class CategoryDTO:
    id: Optional[int]
    name: str


@dataclass
class CategoryDeletionDTO:
    category_id: int
    message: str = "Category deleted successfully"


@dataclass
class ProductDTO:
    id: Optional[int]
    name: str
    image: str
    description: str
    quantity: int
    price: float
    discount: float
    special_price: float
    category: Optional[CategoryDTO] = None


@dataclass
class PageDTO(Generic[T]):
    content: List[T] = field(default_factory=list)
    page_number: int = 0
    page_size: int = 0
    total_elements: int = 0
    total_pages: int = 0
    is_last_page: bool = True


"""DTO dataclasses only. Mapping logic lives in mappers.py."""
