# coding=utf-8
"""
Biodiversity Hub.

.. note:: Hub API urls.
"""

from django.urls import include, re_path

urlpatterns = [
    re_path(
        r'^v1/', include(('hub_api.urls.v1', 'v1'), namespace='v1')
    )
]
