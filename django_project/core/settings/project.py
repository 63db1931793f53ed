# coding=utf-8
"""
Biodiversity Hub.

.. note:: Project level settings.
"""
import os  # noqa

from .contrib import *  # noqa
from .utils import absolute_path

ADMINS = ()
if os.environ.get('DATABASE_HOST'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ.get('DATABASE_NAME', 'biodiversity_hub'),
            'USER': os.environ.get('DATABASE_USERNAME', 'postgres'),
            'PASSWORD': os.environ.get('DATABASE_PASSWORD', ''),
            'HOST': os.environ['DATABASE_HOST'],
            'PORT': int(os.environ.get('DATABASE_PORT', 5432)),
            'TEST': {
                'NAME': 'unittests',
            },
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': absolute_path('db.sqlite3'),
        }
    }

# Extra installed apps
PROJECT_APPS = (
    'core',
    'frontend',
    'species',
    'hub_api',
)
INSTALLED_APPS = INSTALLED_APPS + PROJECT_APPS

TEMPLATES[0]['DIRS'] += [
    absolute_path('frontend', 'templates'),
]
TEMPLATES[0]['OPTIONS']['context_processors'] += [
    'frontend.context_processors.hub_base_context',
]

SITE_TITLE = os.environ.get('SITE_TITLE', 'Biodiversity Hub')
SITE_DESCRIPTION = os.environ.get(
    'SITE_DESCRIPTION', 'Catalogue of species records.'
)
