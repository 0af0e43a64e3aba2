import pytest
from django.http import QueryDict

from hr_records.apps.common.pagination import page_count, parse_page_params


class TestParsePageParams:
    def test_defaults(self):
        assert parse_page_params(QueryDict('')) == (1, 10)

    def test_explicit_values(self):
        assert parse_page_params(QueryDict('page=3&limit=25')) == (3, 25)

    def test_limit_is_capped(self):
        assert parse_page_params(QueryDict('limit=1000'), max_limit=100) == (1, 100)

    def test_custom_default_limit(self):
        assert parse_page_params(QueryDict('page=2'), default_limit=5) == (2, 5)

    @pytest.mark.parametrize('query', ['page=0', 'limit=-1', 'page=abc', 'limit=1.5'])
    def test_invalid_values(self, query):
        with pytest.raises(ValueError):
            parse_page_params(QueryDict(query))


@pytest.mark.parametrize('total,limit,expected', [(0, 10, 0), (10, 10, 1), (11, 10, 2), (5, 0, 0)])
def test_page_count(total, limit, expected):
    assert page_count(total, limit) == expected
