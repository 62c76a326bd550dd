import os
import shutil
import tempfile
from unittest.mock import patch

from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from rest_framework.test import APITestCase

from apps.catalog.models import Category, Product
from apps.catalog.views import ProductImageView


class CatalogApiTests(APITestCase):
    def create_category(self, name):
        return self.client.post(
            reverse("api-categories-list"), {"categoryName": name}, format="json"
        )

    def add_product(self, category_id, name, price=100, discount=0, **extra):
        payload = {"productName": name, "price": price, "discount": discount}
        payload.update(extra)
        return self.client.post(
            reverse("api-categories-product-create", args=[category_id]), payload, format="json"
        )

    def test_category_lifecycle(self):
        created = self.create_category("Electronics")
        self.assertEqual(created.status_code, 201)
        category_id = created.data["categoryId"]

        duplicate = self.create_category("Electronics")
        self.assertEqual(duplicate.status_code, 409)
        self.assertEqual(duplicate.data["error"]["code"], "CONFLICT")

        listing = self.client.get(reverse("api-categories-list"))
        self.assertEqual(listing.status_code, 200)
        self.assertEqual(listing.data["totalElements"], 1)
        self.assertEqual(listing.data["pageNumber"], 0)
        self.assertEqual(listing.data["pageSize"], 50)
        self.assertTrue(listing.data["lastPage"])

        updated = self.client.put(
            reverse("api-categories-detail", args=[category_id]),
            {"categoryName": "Electronic goods"},
            format="json",
        )
        self.assertEqual(updated.status_code, 200)
        self.assertEqual(
            self.client.get(reverse("api-categories-detail", args=[category_id])).data["categoryName"],
            "Electronic goods",
        )

        deleted = self.client.delete(reverse("api-categories-admin", args=[category_id]))
        self.assertEqual(deleted.status_code, 200)
        self.assertEqual(deleted.data["categoryId"], category_id)
        missing = self.client.get(reverse("api-categories-detail", args=[category_id]))
        self.assertEqual(missing.status_code, 404)

    def test_empty_catalog_is_not_found(self):
        response = self.client.get(reverse("api-categories-list"))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"]["message"], "No categories found")
        response = self.client.get(reverse("api-products-list"))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"]["message"], "No products found")

    def test_product_lifecycle(self):
        category_id = self.create_category("Electronics").data["categoryId"]
        created = self.add_product(
            category_id, "Laptop", price=1000, discount=10, quantity=2, productDescription="Fast laptop"
        )
        self.assertEqual(created.status_code, 201)
        self.assertEqual(created.data["specialPrice"], 900.0)
        self.assertEqual(created.data["image"], "default.png")
        product_id = created.data["productId"]

        self.assertEqual(self.add_product(category_id, "Laptop").status_code, 409)
        self.assertEqual(self.add_product(999, "Phone").status_code, 404)

        updated = self.client.put(
            reverse("api-products-admin", args=[product_id]),
            {"productName": "Laptop Pro", "price": 200, "discount": 50},
            format="json",
        )
        self.assertEqual(updated.status_code, 200)
        self.assertEqual(updated.data["specialPrice"], 100.0)
        self.assertEqual(updated.data["category"]["categoryId"], category_id)

        fetched = self.client.get(reverse("api-products-detail", args=[product_id]))
        self.assertEqual(fetched.data["productName"], "Laptop Pro")

        deleted = self.client.delete(reverse("api-products-admin", args=[product_id]))
        self.assertEqual(deleted.status_code, 200)
        self.assertEqual(deleted.data["productId"], product_id)
        self.assertEqual(
            self.client.get(reverse("api-products-detail", args=[product_id])).status_code, 404
        )

    def test_listing_sort_and_pages(self):
        category_id = self.create_category("Electronics").data["categoryId"]
        for index, price in enumerate((30, 10, 20)):
            self.add_product(category_id, f"Item {index}", price=price)
        response = self.client.get(
            reverse("api-products-list"),
            {"sortBy": "price", "sortOrder": "desc", "pageSize": 2},
        )
        self.assertEqual([p["price"] for p in response.data["content"]], [30.0, 20.0])
        self.assertEqual(response.data["totalPages"], 2)
        self.assertFalse(response.data["lastPage"])
        second = self.client.get(
            reverse("api-products-list"),
            {"sortBy": "price", "sortOrder": "desc", "pageSize": 2, "pageNumber": 1},
        )
        self.assertEqual([p["price"] for p in second.data["content"]], [10.0])
        self.assertTrue(second.data["lastPage"])

    def test_invalid_sort_field(self):
        category_id = self.create_category("Electronics").data["categoryId"]
        self.add_product(category_id, "Laptop")
        response = self.client.get(reverse("api-products-list"), {"sortBy": "colour"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("sortBy", response.data["error"]["details"])

    def test_search_by_category_and_keyword(self):
        electronics = self.create_category("Electronics").data["categoryId"]
        furniture = self.create_category("Furniture").data["categoryId"]
        self.add_product(electronics, "Gaming Laptop", price=1500)
        self.add_product(electronics, "Cable", price=5)
        self.add_product(furniture, "Laptop Desk", price=120)

        by_category = self.client.get(reverse("api-categories-products", args=[electronics]))
        self.assertEqual(
            [p["productName"] for p in by_category.data["content"]], ["Cable", "Gaming Laptop"]
        )

        by_keyword = self.client.get(reverse("api-products-keyword", args=["laptop"]))
        self.assertEqual(by_keyword.status_code, 200)
        self.assertEqual(
            [p["productName"] for p in by_keyword.data["content"]], ["Gaming Laptop", "Laptop Desk"]
        )

        nothing = self.client.get(reverse("api-products-keyword", args=["sofa"]))
        self.assertEqual(nothing.status_code, 404)
        self.assertEqual(nothing.data["error"]["message"], "Products not found with keyword: sofa")

        empty_category = self.create_category("Gardening").data["categoryId"]
        empty = self.client.get(reverse("api-categories-products", args=[empty_category]))
        self.assertEqual(empty.status_code, 404)
        self.assertEqual(
            empty.data["error"]["message"], "Gardening category does not have any products"
        )

    def test_category_delete_cascades_to_products(self):
        electronics = self.create_category("Electronics").data["categoryId"]
        self.add_product(electronics, "Laptop")
        self.client.delete(reverse("api-categories-admin", args=[electronics]))
        self.assertFalse(Category.objects.exists())
        self.assertFalse(Product.objects.exists())

    def test_product_image_upload(self):
        category_id = self.create_category("Electronics").data["categoryId"]
        product_id = self.add_product(category_id, "Laptop").data["productId"]
        image_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, image_dir, True)
        upload = SimpleUploadedFile("photo.png", b"png-bytes", content_type="image/png")
        with patch.object(ProductImageView.service, "image_dir", image_dir):
            response = self.client.put(
                reverse("api-products-image", args=[product_id]),
                {"image": upload},
                format="multipart",
            )
        self.assertEqual(response.status_code, 200)
        file_name = response.data["image"]
        self.assertTrue(file_name.endswith(".png"))
        self.assertNotEqual(file_name, "photo.png")
        self.assertTrue(os.path.exists(os.path.join(image_dir, file_name)))
        self.assertEqual(Product.objects.get(pk=product_id).image, file_name)

    def test_product_image_for_missing_product(self):
        image_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, image_dir, True)
        upload = SimpleUploadedFile("photo.png", b"png-bytes", content_type="image/png")
        with patch.object(ProductImageView.service, "image_dir", image_dir):
            response = self.client.put(
                reverse("api-products-image", args=[404]), {"image": upload}, format="multipart"
            )
        self.assertEqual(response.status_code, 404)
        self.assertEqual(os.listdir(image_dir), [])
