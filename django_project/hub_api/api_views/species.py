# coding=utf-8
"""
Biodiversity Hub.

.. note:: Species APIs
"""

from drf_yasg.utils import swagger_auto_schema
from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from hub_api.permissions import IsSpeciesAuthorOrReadOnly
from hub_api.serializers.common import (
    APIErrorSerializer, FieldErrorSerializer
)
from hub_api.serializers.species import (
    SpeciesSerializer,
    SpeciesFormSerializer,
    SpeciesValidationSerializer
)
from hub_api.utils.helper import ApiTag
from species.exceptions import (
    SpeciesAuthorizationException,
    SpeciesNotFoundException,
    SpeciesPersistenceException
)
from species.repository import SpeciesRepository


class SpeciesListAPI(APIView):
    """API to return all species."""

    permission_classes = [IsAuthenticated]
    repository_class = SpeciesRepository

    @swagger_auto_schema(
        operation_id='species-list',
        tags=[ApiTag.SPECIES],
        responses={
            200: SpeciesSerializer(many=True),
            401: APIErrorSerializer
        }
    )
    def get(self, request, *args, **kwargs):
        """GET method to fetch the species collection.

        :param request: API Request
        :type request: rest_framework.request.Request
        :return: API response
        :rtype: rest_framework.response.Response
        """
        return Response(
            status=200,
            data=SpeciesSerializer(
                self.repository_class().list(), many=True
            ).data
        )


class SpeciesDetailAPI(APIView):
    """API to fetch and update a single species."""

    permission_classes = [IsAuthenticated, IsSpeciesAuthorOrReadOnly]
    repository_class = SpeciesRepository

    def get_object(self, pk):
        """Return species, raise 404 if it does not exist."""
        try:
            species = self.repository_class().get(pk)
        except SpeciesNotFoundException as ex:
            raise NotFound(ex.message)
        self.check_object_permissions(self.request, species)
        return species

    @swagger_auto_schema(
        operation_id='species-detail',
        tags=[ApiTag.SPECIES],
        responses={
            200: SpeciesSerializer,
            404: APIErrorSerializer
        }
    )
    def get(self, request, pk, *args, **kwargs):
        """GET method to fetch a species."""
        return Response(
            status=200, data=SpeciesSerializer(self.get_object(pk)).data
        )

    def _update(self, request, pk, partial):
        """Validate the request data and update the species."""
        species = self.get_object(pk)
        serializer = SpeciesFormSerializer(
            data=request.data,
            context={'species': species if partial else None}
        )
        serializer.is_valid(raise_exception=True)
        try:
            species = self.repository_class().update(
                species.pk, serializer.validated_data, request.user
            )
        except SpeciesAuthorizationException as ex:
            raise PermissionDenied(ex.message)
        except SpeciesNotFoundException as ex:
            raise NotFound(ex.message)
        except SpeciesPersistenceException as ex:
            return Response(status=400, data={'detail': ex.message})
        return Response(status=200, data=SpeciesSerializer(species).data)

    @swagger_auto_schema(
        operation_id='species-update',
        operation_description=(
            'Replace all mutable fields of a species. '
            'Only the author of the species may update it.'
        ),
        tags=[ApiTag.SPECIES],
        request_body=SpeciesFormSerializer,
        responses={
            200: SpeciesSerializer,
            400: FieldErrorSerializer,
            403: APIErrorSerializer,
            404: APIErrorSerializer
        }
    )
    def put(self, request, pk, *args, **kwargs):
        """PUT method to update a species."""
        return self._update(request, pk, partial=False)

    @swagger_auto_schema(
        operation_id='species-partial-update',
        operation_description=(
            'Update some fields of a species, other fields keep their '
            'current values. Only the author of the species may update it.'
        ),
        tags=[ApiTag.SPECIES],
        request_body=SpeciesFormSerializer,
        responses={
            200: SpeciesSerializer,
            400: FieldErrorSerializer,
            403: APIErrorSerializer,
            404: APIErrorSerializer
        }
    )
    def patch(self, request, pk, *args, **kwargs):
        """PATCH method to update a species."""
        return self._update(request, pk, partial=True)


class SpeciesValidateAPI(APIView):
    """API to validate a species submission while it is being edited."""

    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_id='species-validate',
        tags=[ApiTag.SPECIES],
        request_body=SpeciesFormSerializer,
        responses={
            200: SpeciesValidationSerializer
        }
    )
    def post(self, request, *args, **kwargs):
        """POST method to validate species fields."""
        serializer = SpeciesFormSerializer(data=request.data)
        valid = serializer.is_valid()
        return Response(
            status=200,
            data={
                'valid': valid,
                'errors': serializer.errors if not valid else {}
            }
        )
