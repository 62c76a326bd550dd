import unittest

from apps.catalog.mappers import CategoryMapper, ProductMapper
from apps.common.pagination import Page


class StubCategory:
    def __init__(self, category_id: int, name: str):
        self.id = category_id
        self.name = name


class StubProduct:
    def __init__(self, product_id: int, name: str, category=None, **fields):
        self.id = product_id
        self.name = name
        self.image = fields.get("image", "default.png")
        self.description = fields.get("description")
        self.quantity = fields.get("quantity", 2)
        self.price = fields.get("price", 100)
        self.discount = fields.get("discount", 25)
        self.special_price = fields.get("special_price", 75)
        self.category = category


class CategoryMapperTests(unittest.TestCase):
    def test_category_mapper_basic(self):
        dto = CategoryMapper.to_dto(StubCategory(1, "Electronics"))
        self.assertEqual(dto.id, 1)
        self.assertEqual(dto.name, "Electronics")

    def test_category_many(self):
        dtos = CategoryMapper.many_to_dto([StubCategory(1, "Alpha"), StubCategory(2, "Bravo")])
        self.assertEqual([d.name for d in dtos], ["Alpha", "Bravo"])

    def test_page_dto_carries_envelope(self):
        page = Page(items=[StubCategory(3, "Charlie")], page_number=1, page_size=2, total_elements=3)
        dto = CategoryMapper.to_page_dto(page)
        self.assertEqual(dto.content[0].id, 3)
        self.assertEqual(dto.page_number, 1)
        self.assertEqual(dto.page_size, 2)
        self.assertEqual(dto.total_elements, 3)
        self.assertEqual(dto.total_pages, 2)
        self.assertTrue(dto.is_last_page)


class ProductMapperTests(unittest.TestCase):
    def test_product_mapper_converts_numbers_and_category(self):
        product = StubProduct(7, "Laptop", category=StubCategory(1, "Electronics"))
        dto = ProductMapper.to_dto(product)
        self.assertEqual(dto.id, 7)
        self.assertEqual(dto.price, 100.0)
        self.assertIsInstance(dto.price, float)
        self.assertEqual(dto.special_price, 75.0)
        self.assertEqual(dto.description, "")
        self.assertEqual(dto.category.name, "Electronics")

    def test_product_without_category(self):
        dto = ProductMapper.to_dto(StubProduct(1, "Loose"))
        self.assertIsNone(dto.category)

    def test_product_page_not_last(self):
        page = Page(items=[StubProduct(1, "A"), StubProduct(2, "B")], page_number=0, page_size=2, total_elements=5)
        dto = ProductMapper.to_page_dto(page)
        self.assertEqual(len(dto.content), 2)
        self.assertEqual(dto.total_pages, 3)
        self.assertFalse(dto.is_last_page)
