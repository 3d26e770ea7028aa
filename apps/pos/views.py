from rest_framework import status, viewsets, serializers as drf_serializers
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.core.exceptions import DuplicationError, NotFoundError
from .domain import Pos
from .serializers import PosSerializer
from .services import get_pos_service, list_pos


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class PosViewSet(viewsets.ViewSet):
    """
    ViewSet for POS CRUD operations.

    list: Get all points of sale (optionally by campus)
    create: Create a point of sale
    retrieve: Get a specific point of sale
    update: Replace a point of sale
    destroy: Delete a point of sale
    """

    permission_classes = [IsAuthenticatedOrReadOnly]
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    @extend_schema(
        parameters=[
            OpenApiParameter('campus', OpenApiTypes.STR, description='Filter by campus'),
        ],
        responses={200: PosSerializer(many=True)},
        tags=['pos'],
    )
    def list(self, request):
        pos_list = list_pos(request.query_params.get('campus') or None)
        return Response(PosSerializer(pos_list, many=True).data)

    @extend_schema(
        request=PosSerializer,
        responses={201: PosSerializer, 400: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=['pos'],
    )
    def create(self, request):
        serializer = PosSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            pos = get_pos_service().upsert(Pos(**serializer.validated_data))
        except DuplicationError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(PosSerializer(pos).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: PosSerializer, 404: ErrorResponseSerializer}, tags=['pos'])
    def retrieve(self, request, pk=None):
        try:
            pos = get_pos_service().get_by_id(pk)
        except NotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(PosSerializer(pos).data)

    @extend_schema(
        request=PosSerializer,
        responses={
            200: PosSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
            409: ErrorResponseSerializer,
        },
        tags=['pos'],
    )
    def update(self, request, pk=None):
        serializer = PosSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            pos = get_pos_service().upsert(Pos(id=pk, **serializer.validated_data))
        except NotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicationError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(PosSerializer(pos).data)

    @extend_schema(responses={204: None, 404: ErrorResponseSerializer}, tags=['pos'])
    def destroy(self, request, pk=None):
        try:
            get_pos_service().delete(pk)
        except NotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)
