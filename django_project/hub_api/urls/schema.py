# coding=utf-8
"""
Biodiversity Hub.

.. note:: Custom schema.
"""

from collections import OrderedDict
from django.conf import settings
from drf_yasg.generators import OpenAPISchemaGenerator

from hub_api.utils.helper import ApiTag


class CustomSchemaGenerator(OpenAPISchemaGenerator):
    """Schema generator that groups the paths by API tag."""

    API_METHODS = ['get', 'post', 'put', 'patch', 'delete']

    def find_api_tag(self, path_item):
        """Return first tag of the first method in openapi.PathItem."""
        for method in self.API_METHODS:
            operation = path_item.get(method, None)
            if operation is None:
                continue
            tags = operation.get('tags', [])
            return tags[0] if len(tags) > 0 else 'other-api'
        return None

    def get_schema(self, request=None, public=False):
        """Return schema with scheme of the current environment."""
        schema = super().get_schema(request, public)
        schema.schemes = ['http'] if settings.DEBUG else ['https']
        return schema

    def get_paths_object(self, paths):
        """Construct the Swagger Paths object ordered by ApiTag.ORDERS.

        :param OrderedDict[str,openapi.PathItem] paths: mapping of paths
            to :class:`.PathItem` objects
        :returns: the :class:`.Paths` object
        :rtype: openapi.Paths
        """
        tag_dict = OrderedDict((tag, []) for tag in ApiTag.ORDERS)
        for api_path, path_item in paths.items():
            tag = self.find_api_tag(path_item)
            if tag is None:
                continue
            tag_dict.setdefault(tag, []).append((api_path, path_item))

        results = OrderedDict()
        for items in tag_dict.values():
            for api_path, path_item in items:
                results[api_path] = path_item
        return super().get_paths_object(results)
