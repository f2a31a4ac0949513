"""Performance regression tests: constant query count (N+1 prevention).

Verifies that list and retrieve endpoints execute a bounded number of
SQL queries regardless of the number of orders, proving that
``select_related`` / ``prefetch_related`` are correctly applied.
"""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration


@pytest.fixture()
def many_orders(service, order_dto):
    return [service.create_order(order_dto) for _ in range(5)]


class TestQueryCount:
    def test_list_query_count_is_constant(
        self, api_client, many_orders, django_assert_max_num_queries
    ):
        # orders + addresses (joined) and one prefetch for the lines
        with django_assert_max_num_queries(2):
            response = api_client.get("/orders")

        assert response.status_code == 200
        assert len(response.data["_embedded"]["orders"]) == 5

    def test_retrieve_query_count(
        self, api_client, many_orders, django_assert_max_num_queries
    ):
        with django_assert_max_num_queries(2):
            response = api_client.get(f"/orders/{many_orders[0].pk}")

        assert response.status_code == 200
