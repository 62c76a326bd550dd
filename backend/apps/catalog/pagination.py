from typing import Any, Dict, Iterable, Optional, Tuple

from django.conf import settings

from apps.common.pagination import PageRequest

from .exceptions import CatalogValidationError

DEFAULT_PAGE_NUMBER = 0
DEFAULT_SORT_ORDER = "asc"
DEFAULT_CATEGORY_SORT = "categoryId"
DEFAULT_PRODUCT_SORT = "productId"

# Public sort keys (wire names and snake_case aliases) -> model fields
CATEGORY_SORT_FIELDS: Dict[str, str] = {
    "categoryId": "id",
    "category_id": "id",
    "id": "id",
    "categoryName": "name",
    "category_name": "name",
    "name": "name",
}

PRODUCT_SORT_FIELDS: Dict[str, str] = {
    "productId": "id",
    "product_id": "id",
    "id": "id",
    "productName": "name",
    "product_name": "name",
    "name": "name",
    "price": "price",
    "discount": "discount",
    "specialPrice": "special_price",
    "special_price": "special_price",
    "quantity": "quantity",
}


def default_page_size() -> int:
    return int(getattr(settings, "CATALOG_PAGE_SIZE", 50))


def max_page_size() -> int:
    return int(getattr(settings, "CATALOG_MAX_PAGE_SIZE", 100))


def is_ascending(sort_order: Optional[str]) -> bool:
    return (sort_order or "").strip().lower() == "asc"


def _as_int(value: Any, field: str, errors: Dict[str, str]) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        errors[field] = f"{field} must be an integer"
        return None


def build_page_request(
    page_number: Any,
    page_size: Any,
    sort_by: Optional[str],
    sort_order: Optional[str],
    *,
    fields: Dict[str, str],
    default_sort: str,
    base_ordering: Iterable[str] = (),
) -> PageRequest:
    """
    Validate listing arguments and turn them into a repository ``PageRequest``.

    ``base_ordering`` is applied before the requested sort; the primary key
    always closes the ordering so page boundaries are stable.
    """
    errors: Dict[str, str] = {}
    number = _as_int(
        DEFAULT_PAGE_NUMBER if page_number is None else page_number,
        "pageNumber",
        errors,
    )
    size = _as_int(
        default_page_size() if page_size is None else page_size, "pageSize", errors
    )
    if number is not None and number < 0:
        errors["pageNumber"] = "pageNumber must be zero or greater"
    if size is not None and not 1 <= size <= max_page_size():
        errors["pageSize"] = f"pageSize must be between 1 and {max_page_size()}"
    key = (sort_by or default_sort).strip()
    model_field = fields.get(key)
    if model_field is None:
        allowed = sorted(k for k in fields if not ("_" in k or k in ("id", "name")))
        errors["sortBy"] = f"Unsupported sort field '{key}'. Allowed: {', '.join(allowed)}"
    if errors:
        raise CatalogValidationError(errors, message="Invalid pagination or sort parameters")

    order = DEFAULT_SORT_ORDER if sort_order is None else sort_order
    direction = "" if is_ascending(order) else "-"
    ordering: Tuple[str, ...] = tuple(base_ordering) + (f"{direction}{model_field}",)
    if model_field != "id":
        ordering += ("id",)
    return PageRequest(page_number=number, page_size=size, ordering=ordering)
