from drf_spectacular.utils import inline_serializer
from rest_framework import serializers


class ErrorDetailSerializer(serializers.Serializer):
    code = serializers.CharField()
    message = serializers.CharField()
    status = serializers.IntegerField()
    details = serializers.JSONField(required=False)


class ErrorResponseSerializer(serializers.Serializer):
    error = ErrorDetailSerializer()


def paginated_response(
    item_serializer_class: type[serializers.Serializer],
) -> serializers.Serializer:
    """Inline schema for the catalog page envelope.

    Fields: content[item_serializer], pageNumber, pageSize, totalElements,
    totalPages, lastPage.
    """
    name = getattr(item_serializer_class, "__name__", "Items")
    return inline_serializer(
        name=f"Page{name}",
        fields={
            "content": item_serializer_class(many=True),
            "pageNumber": serializers.IntegerField(),
            "pageSize": serializers.IntegerField(),
            "totalElements": serializers.IntegerField(),
            "totalPages": serializers.IntegerField(),
            "lastPage": serializers.BooleanField(),
        },
    )
