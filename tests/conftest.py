import copy
from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.orders.dtos import AddressDTO, OrderDTO, OrderLineDTO
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.services import OrderService

ORDER_PAYLOAD = {
    "firstName": "Marie",
    "lastName": "Curie",
    "email": "marie.curie@example.com",
    "phone": "(213) 454-1324",
    "address": {
        "address1": "2213 Camelback Rd",
        "address2": "Apt 2",
        "city": "Phoenix",
        "state": "AZ",
        "zip": "85017",
    },
    "orderLines": [
        {"brand": "Apple", "model": "Phone", "cost": 1000, "quantity": 1},
    ],
    "tax": 100,
    "shipping": 50,
}


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def order_payload():
    """A valid order request body (fresh copy per test)."""
    return copy.deepcopy(ORDER_PAYLOAD)


@pytest.fixture()
def repository():
    return OrderDjangoRepository()


@pytest.fixture()
def service(repository):
    return OrderService(order_repository=repository)


@pytest.fixture()
def order_dto():
    return OrderDTO(
        first_name="Marie",
        last_name="Curie",
        email="marie.curie@example.com",
        address=AddressDTO(
            address1="2213 Camelback Rd",
            address2="Apt 2",
            city="Phoenix",
            state="AZ",
            zip="85017",
        ),
        order_lines=[
            OrderLineDTO(brand="Apple", model="Phone", cost=Decimal("1000"), quantity=1),
            OrderLineDTO(brand="Apple", model="Tablet", cost=Decimal("5000"), quantity=2),
        ],
        tax=Decimal("100"),
        shipping=Decimal("50"),
    )


@pytest.fixture()
def order(service, order_dto):
    """A persisted PROCESSING order."""
    return service.create_order(order_dto)
