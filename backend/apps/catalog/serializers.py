from rest_framework import serializers

from .commands import (
    CATEGORY_NAME_MAX_LENGTH,
    CATEGORY_NAME_MIN_LENGTH,
    PRODUCT_DESCRIPTION_MIN_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    PRODUCT_NAME_MIN_LENGTH,
)
from .dtos import CategoryDTO, PageDTO, ProductDTO


class CategorySerializer(serializers.Serializer):
    categoryId = serializers.IntegerField(read_only=True)
    categoryName = serializers.CharField(
        min_length=CATEGORY_NAME_MIN_LENGTH,
        max_length=CATEGORY_NAME_MAX_LENGTH,
        trim_whitespace=True,
    )

    def to_representation(self, instance):
        if instance is None:
            return None
        # Support dataclass DTO directly
        if isinstance(instance, CategoryDTO):
            return {"categoryId": instance.id, "categoryName": instance.name}
        return super().to_representation(instance)


class CategoryDeletionSerializer(serializers.Serializer):
    categoryId = serializers.IntegerField(source="category_id")
    message = serializers.CharField()


class ProductReadSerializer(serializers.Serializer):
    productId = serializers.IntegerField()
    productName = serializers.CharField()
    image = serializers.CharField()
    productDescription = serializers.CharField()
    quantity = serializers.IntegerField()
    price = serializers.FloatField()
    discount = serializers.FloatField()
    specialPrice = serializers.FloatField()
    category = CategorySerializer(allow_null=True)

    def to_representation(self, instance):
        if instance is None:
            return None
        if isinstance(instance, ProductDTO):
            return {
                "productId": instance.id,
                "productName": instance.name,
                "image": instance.image,
                "productDescription": instance.description,
                "quantity": instance.quantity,
                "price": instance.price,
                "discount": instance.discount,
                "specialPrice": instance.special_price,
                "category": CategorySerializer(instance.category).data
                if instance.category is not None
                else None,
            }
        return super().to_representation(instance)


class ProductWriteSerializer(serializers.Serializer):
    # 'productId', 'image', 'specialPrice' and the category are server-managed
    # and are ignored if a client sends them.
    productName = serializers.CharField(
        min_length=PRODUCT_NAME_MIN_LENGTH, max_length=PRODUCT_NAME_MAX_LENGTH
    )
    productDescription = serializers.CharField(
        required=False, allow_blank=True, min_length=PRODUCT_DESCRIPTION_MIN_LENGTH
    )
    quantity = serializers.IntegerField(required=False, min_value=0, default=0)
    price = serializers.FloatField(min_value=0)
    discount = serializers.FloatField(required=False, default=0)


class ProductImageSerializer(serializers.Serializer):
    image = serializers.FileField(allow_empty_file=False)


class PageQuerySerializer(serializers.Serializer):
    pageNumber = serializers.IntegerField(required=False, min_value=0)
    pageSize = serializers.IntegerField(required=False, min_value=1)
    sortBy = serializers.CharField(required=False)
    sortOrder = serializers.CharField(required=False, allow_blank=True)

    def to_service_kwargs(self):
        data = self.validated_data
        return {
            "page_number": data.get("pageNumber"),
            "page_size": data.get("pageSize"),
            "sort_by": data.get("sortBy"),
            "sort_order": data.get("sortOrder"),
        }


def _page_representation(page: PageDTO, item_serializer_class):
    return {
        "content": item_serializer_class(page.content, many=True).data,
        "pageNumber": page.page_number,
        "pageSize": page.page_size,
        "totalElements": page.total_elements,
        "totalPages": page.total_pages,
        "lastPage": page.is_last_page,
    }


class CategoryPageSerializer(serializers.BaseSerializer):
    def to_representation(self, instance):
        return _page_representation(instance, CategorySerializer)


class ProductPageSerializer(serializers.BaseSerializer):
    def to_representation(self, instance):
        return _page_representation(instance, ProductReadSerializer)
