import unittest

from django.test import override_settings

from apps.catalog.exceptions import CatalogValidationError
from apps.catalog.pagination import (
    CATEGORY_SORT_FIELDS,
    DEFAULT_CATEGORY_SORT,
    DEFAULT_PRODUCT_SORT,
    PRODUCT_SORT_FIELDS,
    build_page_request,
    is_ascending,
)


def product_request(page_number=None, page_size=None, sort_by=None, sort_order=None, **kwargs):
    return build_page_request(
        page_number,
        page_size,
        sort_by,
        sort_order,
        fields=PRODUCT_SORT_FIELDS,
        default_sort=DEFAULT_PRODUCT_SORT,
        **kwargs,
    )


class IsAscendingTests(unittest.TestCase):
    def test_only_asc_is_ascending(self):
        self.assertTrue(is_ascending("asc"))
        self.assertTrue(is_ascending("ASC"))
        self.assertFalse(is_ascending("desc"))
        self.assertFalse(is_ascending("ascending"))
        self.assertFalse(is_ascending(None))


class BuildPageRequestTests(unittest.TestCase):
    @override_settings(CATALOG_PAGE_SIZE=50)
    def test_defaults(self):
        request = product_request()
        self.assertEqual(request.page_number, 0)
        self.assertEqual(request.page_size, 50)
        self.assertEqual(request.ordering, ("id",))

    def test_non_id_sort_gets_id_tiebreaker(self):
        request = product_request(2, 10, "specialPrice", "desc")
        self.assertEqual(request.ordering, ("-special_price", "id"))
        self.assertEqual(request.offset, 20)

    def test_base_ordering_comes_first(self):
        request = product_request(sort_by="productName", base_ordering=("price",))
        self.assertEqual(request.ordering, ("price", "name", "id"))

    def test_category_fields(self):
        request = build_page_request(
            "1", "5", "categoryName", "asc",
            fields=CATEGORY_SORT_FIELDS,
            default_sort=DEFAULT_CATEGORY_SORT,
        )
        self.assertEqual((request.page_number, request.page_size), (1, 5))
        self.assertEqual(request.ordering, ("name", "id"))

    @override_settings(CATALOG_MAX_PAGE_SIZE=100)
    def test_invalid_arguments_collected(self):
        with self.assertRaises(CatalogValidationError) as ctx:
            product_request(-1, 101, "colour")
        self.assertEqual(ctx.exception.message, "Invalid pagination or sort parameters")
        self.assertEqual(set(ctx.exception.errors), {"pageNumber", "pageSize", "sortBy"})

    def test_non_numeric_page_number(self):
        with self.assertRaises(CatalogValidationError) as ctx:
            product_request("first")
        self.assertIn("pageNumber", ctx.exception.errors)

    def test_blank_sort_order_is_descending(self):
        self.assertEqual(product_request(sort_order="").ordering, ("-id",))
        self.assertEqual(product_request(sort_order=None).ordering, ("id",))
