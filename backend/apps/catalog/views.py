from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import paginated_response, ErrorResponseSerializer
from apps.common import get_logger
from .container import build_product_service, build_category_service
from .serializers import (
    CategoryDeletionSerializer,
    CategoryPageSerializer,
    CategorySerializer,
    PageQuerySerializer,
    ProductImageSerializer,
    ProductPageSerializer,
    ProductReadSerializer,
    ProductWriteSerializer,
)

logger = get_logger(__name__).bind(component="catalog", layer="view")

PAGE_PARAMETERS = [
    OpenApiParameter("pageNumber", int, description="0-based page index", required=False),
    OpenApiParameter("pageSize", int, description="Items per page", required=False),
    OpenApiParameter("sortBy", str, description="Field to sort by", required=False),
    OpenApiParameter(
        "sortOrder", str, description="'asc' for ascending, anything else descending", required=False
    ),
]

ERROR_404 = OpenApiResponse(response=ErrorResponseSerializer)
ERROR_400 = OpenApiResponse(response=ErrorResponseSerializer)
ERROR_409 = OpenApiResponse(response=ErrorResponseSerializer)


def _page_kwargs(request):
    query = PageQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    return query.to_service_kwargs()


@extend_schema(tags=["Categories"])
class CategoryListView(APIView):
    permission_classes = [AllowAny]
    service = build_category_service()
    log = logger.bind(view="CategoryListView")

    @extend_schema(
        operation_id="categories_list",
        summary="List categories",
        parameters=PAGE_PARAMETERS,
        responses={200: paginated_response(CategorySerializer), 400: ERROR_400, 404: ERROR_404},
    )
    def get(self, request):
        kwargs = _page_kwargs(request)
        self.log.debug("Handling category list request", **kwargs)
        page = self.service.list_categories(**kwargs)
        return Response(CategoryPageSerializer(page).data)

    @extend_schema(
        summary="Create category",
        request=CategorySerializer,
        responses={201: CategorySerializer, 400: ERROR_400, 409: ERROR_409},
    )
    def post(self, request):
        serializer = CategorySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dto = self.service.create_category(serializer.validated_data)
        self.log.info("Category created via API", category_id=dto.id)
        return Response(CategorySerializer(dto).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Categories"])
class CategoryDetailView(APIView):
    permission_classes = [AllowAny]
    service = build_category_service()
    log = logger.bind(view="CategoryDetailView")

    @extend_schema(
        summary="Get category",
        parameters=[OpenApiParameter("category_id", int, OpenApiParameter.PATH)],
        responses={200: CategorySerializer, 404: ERROR_404},
    )
    def get(self, request, category_id: int):
        self.log.debug("Fetching category detail", category_id=category_id)
        return Response(CategorySerializer(self.service.get_category(category_id)).data)

    @extend_schema(
        summary="Update category",
        request=CategorySerializer,
        responses={200: CategorySerializer, 400: ERROR_400, 404: ERROR_404, 409: ERROR_409},
    )
    def put(self, request, category_id: int):
        serializer = CategorySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Updating category", category_id=category_id)
        dto = self.service.update_category(category_id, serializer.validated_data)
        return Response(CategorySerializer(dto).data)


@extend_schema(tags=["Categories"])
class CategoryAdminView(APIView):
    permission_classes = [AllowAny]
    service = build_category_service()
    log = logger.bind(view="CategoryAdminView")

    @extend_schema(
        summary="Delete category and its products",
        parameters=[OpenApiParameter("category_id", int, OpenApiParameter.PATH)],
        responses={200: CategoryDeletionSerializer, 404: ERROR_404},
    )
    def delete(self, request, category_id: int):
        self.log.info("Deleting category", category_id=category_id)
        result = self.service.delete_category(category_id)
        return Response(CategoryDeletionSerializer(result).data)


@extend_schema(tags=["Products"])
class CategoryProductCreateView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="CategoryProductCreateView")

    @extend_schema(
        summary="Add product to category",
        parameters=[OpenApiParameter("category_id", int, OpenApiParameter.PATH)],
        request=ProductWriteSerializer,
        responses={201: ProductReadSerializer, 400: ERROR_400, 404: ERROR_404, 409: ERROR_409},
    )
    def post(self, request, category_id: int):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info(
            "Creating product via API",
            category_id=category_id,
            name=serializer.validated_data.get("productName"),
        )
        dto = self.service.add_product(category_id, serializer.validated_data)
        return Response(ProductReadSerializer(dto).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Products"])
class CategoryProductListView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="CategoryProductListView")

    @extend_schema(
        summary="List products of a category",
        description="Products are ordered by price ascending before the requested sort.",
        parameters=[OpenApiParameter("category_id", int, OpenApiParameter.PATH), *PAGE_PARAMETERS],
        responses={200: paginated_response(ProductReadSerializer), 400: ERROR_400, 404: ERROR_404},
    )
    def get(self, request, category_id: int):
        kwargs = _page_kwargs(request)
        self.log.debug("Listing category products", category_id=category_id, **kwargs)
        page = self.service.search_by_category(category_id, **kwargs)
        return Response(ProductPageSerializer(page).data)


@extend_schema(tags=["Products"])
class ProductListView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        parameters=PAGE_PARAMETERS,
        responses={200: paginated_response(ProductReadSerializer), 400: ERROR_400, 404: ERROR_404},
    )
    def get(self, request):
        kwargs = _page_kwargs(request)
        self.log.debug("Handling product list request", **kwargs)
        page = self.service.get_all_products(**kwargs)
        return Response(ProductPageSerializer(page).data)


@extend_schema(tags=["Products"])
class ProductKeywordSearchView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductKeywordSearchView")

    @extend_schema(
        summary="Search products by name",
        description="Case-insensitive substring match on the product name.",
        parameters=[OpenApiParameter("keyword", str, OpenApiParameter.PATH), *PAGE_PARAMETERS],
        responses={200: paginated_response(ProductReadSerializer), 400: ERROR_400, 404: ERROR_404},
    )
    def get(self, request, keyword: str):
        kwargs = _page_kwargs(request)
        self.log.debug("Searching products by keyword", keyword=keyword, **kwargs)
        page = self.service.search_by_keyword(keyword, **kwargs)
        return Response(ProductPageSerializer(page).data)


@extend_schema(tags=["Products"])
class ProductDetailView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={200: ProductReadSerializer, 404: ERROR_404},
    )
    def get(self, request, product_id: int):
        self.log.debug("Fetching product detail", product_id=product_id)
        return Response(ProductReadSerializer(self.service.get_product(product_id)).data)


@extend_schema(tags=["Products"])
class ProductAdminView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductAdminView")

    @extend_schema(
        summary="Update product",
        description="Overwrites name, description, quantity, price and discount; special price is recomputed.",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        request=ProductWriteSerializer,
        responses={200: ProductReadSerializer, 400: ERROR_400, 404: ERROR_404, 409: ERROR_409},
    )
    def put(self, request, product_id: int):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Updating product", product_id=product_id)
        dto = self.service.update_product(product_id, serializer.validated_data)
        return Response(ProductReadSerializer(dto).data)

    @extend_schema(
        summary="Delete product",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={200: ProductReadSerializer, 404: ERROR_404},
    )
    def delete(self, request, product_id: int):
        self.log.info("Deleting product", product_id=product_id)
        dto = self.service.delete_product(product_id)
        return Response(ProductReadSerializer(dto).data)


@extend_schema(tags=["Products"])
class ProductImageView(APIView):
    permission_classes = [AllowAny]
    parser_classes = [MultiPartParser, FormParser]
    service = build_product_service()
    log = logger.bind(view="ProductImageView")

    @extend_schema(
        summary="Replace product image",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        request={"multipart/form-data": ProductImageSerializer},
        responses={200: ProductReadSerializer, 400: ERROR_400, 404: ERROR_404},
    )
    def put(self, request, product_id: int):
        serializer = ProductImageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        upload = serializer.validated_data["image"]
        self.log.info("Uploading product image", product_id=product_id, file_name=upload.name)
        dto = self.service.update_product_image(product_id, upload)
        return Response(ProductReadSerializer(dto).data)
