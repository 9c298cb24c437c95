"""
Products API v1 views.
"""
from uuid import UUID

from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.infrastructure.storage import S3ImageStorage
from apps.stores.infrastructure.repositories import DjangoStoreRepository
from ....application.dtos.product_dto import (
    ImageAction,
    ProductCreateDTO,
    ProductListQueryDTO,
    ProductUpdateDTO,
    StoreProductsQueryDTO,
)
from ....application.use_cases import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetAllProductsUseCase,
    GetProductByIdUseCase,
    GetStoreProductsUseCase,
    UpdateProductUseCase,
)
from ....infrastructure.repositories import DjangoProductRepository, DjangoCategoryRepository
from ...permissions import CanModifyProduct
from ...serializers.product_serializer import (
    ImageActionSerializer,
    PaginatedProductSerializer,
    ProductCreateSerializer,
    ProductListQuerySerializer,
    ProductListSerializer,
    ProductSerializer,
    ProductUpdateSerializer,
    StoreProductsQuerySerializer,
)

LIST_FILTERS = ('store_id', 'category_id', 'sub_category_id', 'status')


@extend_schema(tags=['Products'])
class ProductListCreateView(APIView):
    """Product list and create endpoint."""
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(
        parameters=[ProductListQuerySerializer],
        responses={200: ProductListSerializer},
        summary="List products",
    )
    def get(self, request):
        query = ProductListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data

        use_case = GetAllProductsUseCase(product_repository=DjangoProductRepository())
        result = use_case.execute(
            ProductListQueryDTO(
                filters={key: params[key] for key in LIST_FILTERS if key in params},
                page=params['page'],
                limit=params['limit'],
                sort=query.to_sort(),
            )
        )

        serializer = ProductListSerializer(result.data)
        return Response(serializer.data)

    @extend_schema(
        request={'multipart/form-data': ProductCreateSerializer},
        responses={201: ProductSerializer},
        summary="Create a product",
    )
    def post(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        use_case = CreateProductUseCase(
            product_repository=DjangoProductRepository(),
            store_repository=DjangoStoreRepository(),
            category_repository=DjangoCategoryRepository(),
            image_storage=S3ImageStorage(),
        )
        result = use_case.execute(
            ProductCreateDTO(
                name=data['name'],
                description=data.get('description', ""),
                price=data['price'],
                stock=data['stock'],
                category_id=data['category_id'],
                store_id=data['store_id'],
                seller_id=str(request.user.pk),
                sub_category_id=data.get('sub_category_id'),
                main_image=data.get('main_image'),
                additional_images=data.get('additional_images', []),
            )
        )

        output = ProductSerializer(result.data)
        return Response(output.data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Products'])
class ProductDetailView(APIView):
    """Product detail endpoint."""
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAuthenticated(), CanModifyProduct()]

    @extend_schema(
        responses={200: ProductSerializer},
        summary="Get product detail",
    )
    def get(self, request, product_id: UUID):
        use_case = GetProductByIdUseCase(product_repository=DjangoProductRepository())
        result = use_case.execute(product_id)
        if not result.data:
            return Response({'error': 'Product not found'}, status=status.HTTP_404_NOT_FOUND)

        serializer = ProductSerializer(result.data)
        return Response(serializer.data)

    @extend_schema(
        parameters=[ImageActionSerializer],
        request={'multipart/form-data': ProductUpdateSerializer},
        responses={200: ProductSerializer},
        summary="Update a product",
    )
    def put(self, request, product_id: UUID):
        return self._update(request, product_id)

    @extend_schema(
        parameters=[ImageActionSerializer],
        request={'multipart/form-data': ProductUpdateSerializer},
        responses={200: ProductSerializer},
        summary="Partially update a product",
    )
    def patch(self, request, product_id: UUID):
        return self._update(request, product_id)

    @extend_schema(
        responses={204: None},
        summary="Delete a product",
    )
    def delete(self, request, product_id: UUID):
        use_case = DeleteProductUseCase(
            product_repository=DjangoProductRepository(),
            image_storage=S3ImageStorage(),
        )
        result = use_case.execute(product_id)
        if not result.data:
            return Response({'error': 'Product not found'}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _update(self, request, product_id: UUID):
        action = ImageActionSerializer(data=request.query_params)
        action.is_valid(raise_exception=True)

        serializer = ProductUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        use_case = UpdateProductUseCase(
            product_repository=DjangoProductRepository(),
            category_repository=DjangoCategoryRepository(),
            image_storage=S3ImageStorage(),
        )
        result = use_case.execute(
            ProductUpdateDTO(
                product_id=product_id,
                name=data.get('name'),
                description=data.get('description'),
                price=data.get('price'),
                stock=data.get('stock'),
                status=data.get('status'),
                category_id=data.get('category_id'),
                sub_category_id=data.get('sub_category_id'),
                main_image=data.get('main_image'),
                additional_images=data.get('additional_images', []),
                image_action=ImageAction(action.validated_data['image_action']),
            )
        )

        output = ProductSerializer(result.data)
        return Response(output.data)


@extend_schema(tags=['Products'])
class StoreProductsView(APIView):
    """Active products of a single store."""
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='page', type=int, required=False),
            OpenApiParameter(name='limit', type=int, required=False),
            OpenApiParameter(name='sort_by', type=str, required=False),
            OpenApiParameter(name='order', type=str, required=False, enum=['asc', 'desc']),
        ],
        responses={200: PaginatedProductSerializer},
        summary="List store products",
    )
    def get(self, request, store_id: UUID):
        query = StoreProductsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data

        use_case = GetStoreProductsUseCase(
            product_repository=DjangoProductRepository(),
            store_repository=DjangoStoreRepository(),
        )
        result = use_case.execute(
            StoreProductsQueryDTO(
                store_id=store_id,
                page=params['page'],
                limit=params['limit'],
                sort=query.to_sort(),
            )
        )

        serializer = PaginatedProductSerializer(result.data)
        return Response(serializer.data)
