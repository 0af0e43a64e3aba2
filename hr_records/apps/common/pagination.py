"""
Shared pagination for list endpoints.

Clients page with ``?page=<n>&limit=<size>``; the response carries the
page of results next to a ``pagination`` block.
"""
import math

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


class StandardResultsSetPagination(PageNumberPagination):
    page_size = 10
    page_size_query_param = 'limit'
    max_page_size = 100

    def get_paginated_response(self, data):
        total = self.page.paginator.count
        limit = self.page.paginator.per_page
        return Response({
            'count': total,
            'results': data,
            'pagination': {
                'total': total,
                'page': self.page.number,
                'limit': limit,
                'pages': page_count(total, limit),
            },
        })

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'properties': {
                'count': {'type': 'integer'},
                'results': schema,
                'pagination': {
                    'type': 'object',
                    'properties': {
                        'total': {'type': 'integer'},
                        'page': {'type': 'integer'},
                        'limit': {'type': 'integer'},
                        'pages': {'type': 'integer'},
                    },
                },
            },
        }


def parse_page_params(query_params, default_limit: int = 10, max_limit: int = 100):
    """
    Read ``page`` and ``limit`` from query parameters.

    Raises ``ValueError`` when either is not a positive integer.
    """
    def positive(name, default):
        value = query_params.get(name)
        if value in (None, ''):
            return default
        number = int(value)
        if number < 1:
            raise ValueError(f"{name} must be a positive integer")
        return number

    return positive('page', 1), min(positive('limit', default_limit), max_limit)
