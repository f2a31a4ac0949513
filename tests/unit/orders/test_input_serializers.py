"""Unit tests for order input serializers and their flattened error maps.

Covers:
- Required fields and their messages.
- Length limits, e-mail and phone formats.
- Money and quantity rules, including storage bounds.
- Nested field paths for the address and order lines.
- Status names (update only).
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.orders.constants import QUANTITY_MAX
from modules.orders.serializers import (
    PHONE_FORMAT_MESSAGE,
    STATUS_MESSAGE,
    AddressInputSerializer,
    OrderInputSerializer,
    OrderLineInputSerializer,
    OrderUpdateSerializer,
    flatten_errors,
)

pytestmark = pytest.mark.unit


def errors_for(data, serializer_class=OrderInputSerializer):
    serializer = serializer_class(data=data)
    if serializer.is_valid():
        return {}
    return flatten_errors(serializer.errors)


@pytest.fixture()
def address():
    return {
        "address1": "2213 Camelback Rd",
        "address2": "Apt 2",
        "city": "Phoenix",
        "state": "AZ",
        "zip": "85017",
    }


@pytest.fixture()
def order_line():
    return {"brand": "Apple", "model": "Phone", "cost": 1000, "quantity": 1}


class TestOrderInputSerializer:
    def test_valid_payload_has_no_errors(self, order_payload):
        assert errors_for(order_payload) == {}

    def test_validated_data_uses_attribute_names(self, order_payload):
        serializer = OrderInputSerializer(data=order_payload)
        assert serializer.is_valid()

        data = serializer.validated_data
        assert data["first_name"] == "Marie"
        assert data["order_lines"][0]["cost"] == Decimal("1000.00")
        assert data["tax"] == Decimal("100.00")

    def test_empty_payload_reports_every_required_field(self):
        assert errors_for({}) == {
            "firstName": "First name is required.",
            "lastName": "Last name is required.",
            "email": "Email is required.",
            "tax": "Tax is required.",
            "shipping": "Shipping is required.",
            "address": "Address is required.",
            "orderLines": "Order lines are required.",
        }

    def test_non_object_payload(self):
        assert errors_for(["not", "an", "object"]) == {
            "non_field_errors": "Order must be an object."
        }

    def test_blank_first_name_is_required(self, order_payload):
        order_payload["firstName"] = "   "

        assert errors_for(order_payload) == {"firstName": "First name is required."}

    def test_name_length_limit(self, order_payload):
        order_payload["lastName"] = "x" * 26

        assert errors_for(order_payload) == {
            "lastName": "Last name cannot be greater than 25 characters."
        }

    def test_name_at_limit_is_valid(self, order_payload):
        order_payload["firstName"] = "x" * 25

        assert errors_for(order_payload) == {}

    @pytest.mark.parametrize("email", ["marie", "marie@", "marie|curie@example.com"])
    def test_invalid_email(self, order_payload, email):
        order_payload["email"] = email

        assert errors_for(order_payload) == {"email": "Email format is invalid."}

    @pytest.mark.parametrize(
        "phone", ["2134541324", "(213) 454-1324", "+111 (213) 454-1324", "213.454.1324"]
    )
    def test_valid_phone_formats(self, order_payload, phone):
        order_payload["phone"] = phone

        assert errors_for(order_payload) == {}

    @pytest.mark.parametrize("phone", [None, ""])
    def test_phone_is_optional(self, order_payload, phone):
        order_payload["phone"] = phone

        assert errors_for(order_payload) == {}

    def test_invalid_phone(self, order_payload):
        order_payload["phone"] = "call me"

        assert errors_for(order_payload) == {"phone": PHONE_FORMAT_MESSAGE}

    def test_negative_tax(self, order_payload):
        order_payload["tax"] = -1

        assert errors_for(order_payload) == {"tax": "Tax must be positive or zero."}

    def test_tax_must_be_a_number(self, order_payload):
        order_payload["tax"] = "lots"

        assert errors_for(order_payload) == {"tax": "Tax must be a number."}

    def test_zero_shipping_is_valid(self, order_payload):
        order_payload["shipping"] = 0

        assert errors_for(order_payload) == {}

    def test_money_with_three_decimal_places(self, order_payload):
        order_payload["shipping"] = 1.005

        assert errors_for(order_payload) == {
            "shipping": "Shipping must have at most 2 decimal places."
        }

    @pytest.mark.parametrize("tax", [10**12, 10**10, "1e15"])
    def test_money_above_storage_limit(self, order_payload, tax):
        order_payload["tax"] = tax

        assert errors_for(order_payload) == {
            "tax": "Tax cannot be greater than 9999999999.99."
        }

    def test_largest_storable_money(self, order_payload):
        order_payload["tax"] = "9999999999.99"

        assert errors_for(order_payload) == {}

    def test_empty_order_lines_are_allowed(self, order_payload):
        order_payload["orderLines"] = []

        assert errors_for(order_payload) == {}

    def test_order_lines_must_be_a_list(self, order_payload):
        order_payload["orderLines"] = {"brand": "Apple"}

        assert errors_for(order_payload) == {"orderLines": "Order lines must be a list."}

    def test_nested_errors_use_field_paths(self, order_payload):
        order_payload["address"]["city"] = ""
        order_payload["orderLines"].append(
            {"brand": "Apple", "model": "Tablet", "cost": -5, "quantity": 1}
        )

        assert errors_for(order_payload) == {
            "address.city": "City is required.",
            "orderLines[1].cost": "Cost must be positive or zero.",
        }

    def test_address_must_be_an_object(self, order_payload):
        order_payload["address"] = "Phoenix"

        assert errors_for(order_payload) == {"address": "Address must be an object."}

    def test_order_line_must_be_an_object(self, order_payload):
        order_payload["orderLines"].append("Tablet")

        assert errors_for(order_payload) == {
            "orderLines[1]": "Order line must be an object."
        }

    def test_status_is_not_validated_on_create(self, order_payload):
        order_payload["status"] = "SHIPPED"

        serializer = OrderInputSerializer(data=order_payload)

        assert serializer.is_valid()
        assert "status" not in serializer.validated_data


class TestAddressInputSerializer:
    def test_valid(self, address):
        assert errors_for(address, AddressInputSerializer) == {}

    def test_address2_is_optional(self, address):
        del address["address2"]

        assert errors_for(address, AddressInputSerializer) == {}

    @pytest.mark.parametrize("state", ["Arizona", "A"])
    def test_state_must_be_two_characters(self, address, state):
        address["state"] = state

        assert errors_for(address, AddressInputSerializer) == {
            "state": "State must be exactly 2 characters."
        }

    @pytest.mark.parametrize("zip_code", ["1234", "12345678901"])
    def test_zip_length(self, address, zip_code):
        address["zip"] = zip_code

        assert errors_for(address, AddressInputSerializer) == {
            "zip": "Zip must be between 5 and 10 characters."
        }

    def test_zip_plus_four_is_valid(self, address):
        address["zip"] = "85017-1234"

        assert errors_for(address, AddressInputSerializer) == {}


class TestOrderLineInputSerializer:
    def test_valid(self, order_line):
        assert errors_for(order_line, OrderLineInputSerializer) == {}

    def test_required_fields(self):
        assert errors_for({}, OrderLineInputSerializer) == {
            "brand": "Brand is required.",
            "model": "Model is required.",
            "cost": "Cost is required.",
            "quantity": "Quantity is required.",
        }

    def test_zero_cost_and_quantity_are_valid(self, order_line):
        order_line.update(cost=0, quantity=0)

        assert errors_for(order_line, OrderLineInputSerializer) == {}

    def test_fractional_quantity(self, order_line):
        order_line["quantity"] = 1.5

        assert errors_for(order_line, OrderLineInputSerializer) == {
            "quantity": "Quantity must be a whole number."
        }

    def test_negative_quantity(self, order_line):
        order_line["quantity"] = -1

        assert errors_for(order_line, OrderLineInputSerializer) == {
            "quantity": "Quantity must be positive or zero."
        }

    def test_quantity_above_storage_limit(self, order_line):
        order_line["quantity"] = 2**64

        assert errors_for(order_line, OrderLineInputSerializer) == {
            "quantity": f"Quantity cannot be greater than {QUANTITY_MAX}."
        }

    def test_cost_decimal_places(self, order_line):
        order_line["cost"] = 9.999

        assert errors_for(order_line, OrderLineInputSerializer) == {
            "cost": "Cost must have at most 2 decimal places."
        }

    def test_cost_above_storage_limit(self, order_line):
        order_line["cost"] = 10**10

        assert errors_for(order_line, OrderLineInputSerializer) == {
            "cost": "Cost cannot be greater than 9999999999.99."
        }


class TestOrderUpdateSerializer:
    @pytest.mark.parametrize("value", [None, "PROCESSING", "COMPLETED", "CANCELED"])
    def test_accepted(self, order_payload, value):
        order_payload["status"] = value

        assert errors_for(order_payload, OrderUpdateSerializer) == {}

    def test_status_is_optional(self, order_payload):
        assert errors_for(order_payload, OrderUpdateSerializer) == {}

    @pytest.mark.parametrize("value", ["PROC", "processing", "", 1])
    def test_rejected(self, order_payload, value):
        order_payload["status"] = value

        assert errors_for(order_payload, OrderUpdateSerializer) == {
            "status": STATUS_MESSAGE
        }

    def test_message_lists_names(self):
        assert STATUS_MESSAGE == "Status must be one of PROCESSING, COMPLETED, CANCELED."


class TestFlattenErrors:
    def test_keeps_first_message_per_field(self):
        errors = {"email": ["first", "second"]}

        assert flatten_errors(errors) == {"email": "first"}

    def test_valid_list_items_are_skipped(self):
        errors = {"orderLines": [{}, {"cost": ["bad"]}]}

        assert flatten_errors(errors) == {"orderLines[1].cost": "bad"}
