# coding=utf-8
"""
Biodiversity Hub.

.. note:: Settings helpers.
"""

import os


def absolute_path(*args):
    """Return absolute path of the django project folder."""
    return os.path.join(
        os.path.dirname(os.path.dirname(os.path.dirname(
            os.path.abspath(__file__)
        ))),
        *args
    )


def env_list(name, default=''):
    """Return comma separated environment variable as list."""
    return [
        item.strip() for item in os.environ.get(name, default).split(',')
        if item.strip()
    ]
