from django.db import models


class Category(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        db_table = "categories"
        ordering = ["id"]

    def __str__(self):
        return self.name


class Product(models.Model):
    name = models.CharField(max_length=255)
    image = models.CharField(max_length=255, default="default.png")
    description = models.TextField(blank=True, default="")
    quantity = models.PositiveIntegerField(default=0)
    price = models.FloatField(default=0)
    discount = models.FloatField(default=0)
    # Derived from price/discount by the service on every write.
    special_price = models.FloatField(default=0)
    category = models.ForeignKey(
        Category, on_delete=models.CASCADE, related_name="products"
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["name"], name="product_name_idx"),
            models.Index(fields=["category", "price"], name="product_cat_price_idx"),
        ]

    def __str__(self):
        return self.name
