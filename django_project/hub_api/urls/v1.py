# coding=utf-8
"""
Biodiversity Hub.

.. note:: Hub API v1 urls.
"""
from django.urls import include, re_path, path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions, authentication

from hub_api.api_views.species import (
    SpeciesListAPI,
    SpeciesDetailAPI,
    SpeciesValidateAPI
)
from hub_api.api_views.user import UserInfo
from hub_api.urls.schema import CustomSchemaGenerator

schema_view_v1 = get_schema_view(
    openapi.Info(
        title='Biodiversity Hub API',
        description='API to read and edit species records.',
        default_version='v1'
    ),
    public=True,
    authentication_classes=[authentication.SessionAuthentication],
    permission_classes=[permissions.AllowAny],
    generator_class=CustomSchemaGenerator,
    patterns=[
        re_path(
            r'^api/',
            include((
                [
                    re_path(
                        r'^v1/',
                        include(('hub_api.urls.v1', 'v1'), namespace='v1')
                    )
                ], 'api'),
                namespace='api'
            )
        )
    ],
)

# USER API
user_urls = [
    path(
        'user/me',
        UserInfo.as_view(),
        name='user-info'
    ),
]

# SPECIES API
species_urls = [
    path(
        'species/',
        SpeciesListAPI.as_view(),
        name='species-list'
    ),
    path(
        'species/validate/',
        SpeciesValidateAPI.as_view(),
        name='species-validate'
    ),
    path(
        'species/<int:pk>/',
        SpeciesDetailAPI.as_view(),
        name='species-detail'
    ),
]

urlpatterns = [
    re_path(
        r'^docs/$',
        schema_view_v1.with_ui('swagger', cache_timeout=0),
        name='schema-swagger'
    ),
]
urlpatterns += user_urls
urlpatterns += species_urls
