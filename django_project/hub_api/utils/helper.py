# coding=utf-8
"""
Biodiversity Hub.

.. note:: API helper class.
"""


# API TAGS
class ApiTag:
    """Class contains API Tags."""

    USER = 'User'
    SPECIES = 'Species'

    ORDERS = [
        SPECIES,
        USER,
    ]
