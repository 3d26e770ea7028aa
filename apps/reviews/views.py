from rest_framework import status, viewsets, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.domain import User
from apps.core.exceptions import DuplicationError, NotFoundError, ValidationError
from apps.pos.domain import Pos
from .domain import Review
from .permissions import IsReviewAuthorOrReadOnly
from .serializers import (
    ReviewSerializer,
    ReviewCreateSerializer,
    ReviewFilterSerializer,
)
from .services import get_review_service


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class ReviewPagination(PageNumberPagination):
    """Custom pagination for reviews."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


def _error(exc, status_code):
    return Response({'error': str(exc)}, status=status_code)


class ReviewViewSet(viewsets.GenericViewSet):
    """
    ViewSet for reviews of points of sale.

    list: Get all reviews
    create: Submit a review as the current user
    retrieve: Get a specific review
    destroy: Delete a review (author only)
    filter: Get the reviews of a POS by approval status
    approve: Approve a review as the current user
    """

    serializer_class = ReviewSerializer
    permission_classes = [IsAuthenticatedOrReadOnly, IsReviewAuthorOrReadOnly]
    pagination_class = ReviewPagination
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    @extend_schema(responses={200: ReviewSerializer(many=True)}, tags=['reviews'])
    def list(self, request):
        reviews = get_review_service().get_all()
        page = self.paginate_queryset(reviews)

        if page is not None:
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)

        serializer = self.get_serializer(reviews, many=True)
        return Response(serializer.data)

    @extend_schema(
        request=ReviewCreateSerializer,
        responses={
            201: ReviewSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
            409: ErrorResponseSerializer,
        },
        description="Submit a review for a POS. Each user can review a POS once.",
        tags=['reviews'],
    )
    def create(self, request):
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        draft = Review(
            pos=Pos(id=serializer.validated_data['pos_id'], name=''),
            author=User(id=request.user.id, email=request.user.email),
            content=serializer.validated_data['content'],
        )

        try:
            review = get_review_service().submit(draft)
        except ValidationError as e:
            return _error(e, status.HTTP_400_BAD_REQUEST)
        except NotFoundError as e:
            return _error(e, status.HTTP_404_NOT_FOUND)
        except DuplicationError as e:
            return _error(e, status.HTTP_409_CONFLICT)

        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ReviewSerializer, 404: ErrorResponseSerializer}, tags=['reviews'])
    def retrieve(self, request, pk=None):
        try:
            review = get_review_service().get_by_id(pk)
        except NotFoundError as e:
            return _error(e, status.HTTP_404_NOT_FOUND)

        return Response(ReviewSerializer(review).data)

    @extend_schema(responses={204: None, 403: None, 404: ErrorResponseSerializer}, tags=['reviews'])
    def destroy(self, request, pk=None):
        service = get_review_service()

        try:
            review = service.get_by_id(pk)
            self.check_object_permissions(request, review)
            service.delete(review.id)
        except NotFoundError as e:
            return _error(e, status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[
            OpenApiParameter('pos_id', OpenApiTypes.UUID, required=True, description='POS to get reviews for'),
            OpenApiParameter('approved', OpenApiTypes.BOOL, required=True, description='Approval status'),
        ],
        responses={200: ReviewSerializer(many=True), 400: None, 404: ErrorResponseSerializer},
        tags=['reviews'],
    )
    @action(detail=False, methods=['get'], url_path='filter', url_name='filter')
    def filter_reviews(self, request):
        """Get the reviews of a POS with the given approval status."""
        params = ReviewFilterSerializer(data=request.query_params.dict())
        params.is_valid(raise_exception=True)

        try:
            reviews = get_review_service().filter(
                params.validated_data['pos_id'],
                params.validated_data['approved'],
            )
        except NotFoundError as e:
            return _error(e, status.HTTP_404_NOT_FOUND)

        return Response(ReviewSerializer(reviews, many=True).data)

    @extend_schema(
        request=None,
        responses={
            200: ReviewSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
            409: ErrorResponseSerializer,
        },
        description="Approve another user's review. The review is approved once it reaches the approval quorum.",
        tags=['reviews'],
    )
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated])
    def approve(self, request, pk=None):
        """Approve a review as the current user."""
        service = get_review_service()

        try:
            review = service.approve(service.get_by_id(pk), request.user.id)
        except ValidationError as e:
            return _error(e, status.HTTP_400_BAD_REQUEST)
        except NotFoundError as e:
            return _error(e, status.HTTP_404_NOT_FOUND)
        except DuplicationError as e:
            return _error(e, status.HTTP_409_CONFLICT)

        return Response(ReviewSerializer(review).data)
