"""Order DRF serializers for API input/output.

Input serializers validate request payloads, one per entity, and report
failures as ``{field_path: message}`` through ``flatten_errors``.  Field
paths are dotted for nested objects (``address.city``) and
bracket-indexed for list elements (``orderLines[0].cost``).  The Service
Layer receives Pydantic DTOs from ``dtos.py``, never raw payloads.

Output serializers render an order for responses.  Keys are camelCase;
status is rendered by name (``PROCESSING``), not by its stored code.
"""

from __future__ import annotations

from typing import Any, Dict

from rest_framework import serializers
from rest_framework.settings import api_settings

from modules.orders.constants import (
    ADDRESS1_MAX_LENGTH,
    ADDRESS2_MAX_LENGTH,
    BRAND_MAX_LENGTH,
    CITY_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    EMAIL_PATTERN,
    MODEL_MAX_LENGTH,
    MONEY_DECIMAL_PLACES,
    MONEY_MAX_DIGITS,
    MONEY_MAX_VALUE,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    PHONE_PATTERN,
    QUANTITY_MAX,
    STATE_LENGTH,
    TOTAL_MAX_DIGITS,
    ZIP_MAX_LENGTH,
    ZIP_MIN_LENGTH,
    OrderStatus,
)
from modules.orders.models import Address, Order, OrderLine

PHONE_FORMAT_MESSAGE = (
    "Phone number format is invalid. Valid formats include (but are not "
    "limited to) 2134541324, (213) 454-1324, and +111 (213) 454-1324."
)

ZIP_LENGTH_MESSAGE = f"Zip must be between {ZIP_MIN_LENGTH} and {ZIP_MAX_LENGTH} characters."

STATUS_MESSAGE = "Status must be one of {}.".format(", ".join(OrderStatus.names))


def required_text(
    label: str,
    max_length: int,
    min_length: int | None = None,
    messages: Dict[str, str] | None = None,
    **kwargs: Any,
) -> serializers.CharField:
    """A required string field whose errors read ``"<label> ..."``."""
    missing = f"{label} is required."
    error_messages = {
        "required": missing,
        "null": missing,
        "blank": missing,
        "invalid": f"{label} must be a string.",
        "max_length": f"{label} cannot be greater than {max_length} characters.",
        **(messages or {}),
    }
    return serializers.CharField(
        max_length=max_length,
        min_length=min_length,
        error_messages=error_messages,
        **kwargs,
    )


def money(label: str) -> serializers.DecimalField:
    too_large = f"{label} cannot be greater than {MONEY_MAX_VALUE}."
    return serializers.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        min_value=0,
        error_messages={
            "required": f"{label} is required.",
            "null": f"{label} is required.",
            "invalid": f"{label} must be a number.",
            "min_value": f"{label} must be positive or zero.",
            "max_digits": too_large,
            "max_whole_digits": too_large,
            "max_string_length": too_large,
            "max_decimal_places": (
                f"{label} must have at most {MONEY_DECIMAL_PLACES} decimal places."
            ),
        },
    )


def flatten_errors(errors: Any, prefix: str = "") -> Dict[str, str]:
    """Translate ``serializer.errors`` into ``{field_path: message}``.

    Only the first message of each field is kept.  Errors raised by a
    nested serializer for its whole value (e.g. not an object) are
    reported at the nested field's own path.
    """
    flat: Dict[str, str] = {}
    if isinstance(errors, dict):
        for key, value in errors.items():
            if key == api_settings.NON_FIELD_ERRORS_KEY:
                path = prefix or key
            else:
                path = f"{prefix}.{key}" if prefix else key
            flat.update(flatten_errors(value, path))
    elif errors and all(isinstance(error, str) for error in errors):
        flat[prefix] = str(errors[0])
    else:
        for index, item in enumerate(errors):
            flat.update(flatten_errors(item, f"{prefix}[{index}]"))
    return flat


# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class AddressInputSerializer(serializers.Serializer):
    """Validates an order's address."""

    default_error_messages = {"invalid": "Address must be an object."}

    address1 = required_text("Address line 1", ADDRESS1_MAX_LENGTH)
    address2 = serializers.CharField(
        max_length=ADDRESS2_MAX_LENGTH,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={
            "invalid": "Address line 2 must be a string.",
            "max_length": (
                f"Address line 2 cannot be greater than {ADDRESS2_MAX_LENGTH} characters."
            ),
        },
    )
    city = required_text("City", CITY_MAX_LENGTH)
    state = required_text(
        "State",
        STATE_LENGTH,
        min_length=STATE_LENGTH,
        messages={
            "max_length": f"State must be exactly {STATE_LENGTH} characters.",
            "min_length": f"State must be exactly {STATE_LENGTH} characters.",
        },
    )
    zip = required_text(
        "Zip",
        ZIP_MAX_LENGTH,
        min_length=ZIP_MIN_LENGTH,
        messages={
            "max_length": ZIP_LENGTH_MESSAGE,
            "min_length": ZIP_LENGTH_MESSAGE,
        },
    )


class OrderLineInputSerializer(serializers.Serializer):
    """Validates a single line of an order."""

    default_error_messages = {"invalid": "Order line must be an object."}

    brand = required_text("Brand", BRAND_MAX_LENGTH)
    model = required_text("Model", MODEL_MAX_LENGTH)
    cost = money("Cost")
    quantity = serializers.IntegerField(
        min_value=0,
        max_value=QUANTITY_MAX,
        error_messages={
            "required": "Quantity is required.",
            "null": "Quantity is required.",
            "invalid": "Quantity must be a whole number.",
            "max_string_length": "Quantity must be a whole number.",
            "min_value": "Quantity must be positive or zero.",
            "max_value": f"Quantity cannot be greater than {QUANTITY_MAX}.",
        },
    )


class OrderInputSerializer(serializers.Serializer):
    """Validates the order creation payload.

    ``status`` is not a field here: new orders always start in PROCESSING,
    so a client-supplied status is dropped like any unknown key.
    """

    default_error_messages = {"invalid": "Order must be an object."}

    firstName = required_text("First name", NAME_MAX_LENGTH, source="first_name")
    lastName = required_text("Last name", NAME_MAX_LENGTH, source="last_name")
    email = serializers.RegexField(
        EMAIL_PATTERN,
        max_length=EMAIL_MAX_LENGTH,
        error_messages={
            "required": "Email is required.",
            "null": "Email is required.",
            "blank": "Email is required.",
            "invalid": "Email format is invalid.",
            "max_length": f"Email cannot be greater than {EMAIL_MAX_LENGTH} characters.",
        },
    )
    phone = serializers.RegexField(
        PHONE_PATTERN,
        max_length=PHONE_MAX_LENGTH,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={
            "invalid": PHONE_FORMAT_MESSAGE,
            "max_length": (
                f"Phone number cannot be greater than {PHONE_MAX_LENGTH} characters."
            ),
        },
    )
    address = AddressInputSerializer(
        error_messages={
            "required": "Address is required.",
            "null": "Address is required.",
        }
    )
    orderLines = OrderLineInputSerializer(
        many=True,
        source="order_lines",
        error_messages={
            "required": "Order lines are required.",
            "null": "Order lines are required.",
            "not_a_list": "Order lines must be a list.",
        },
    )
    tax = money("Tax")
    shipping = money("Shipping")


class OrderUpdateSerializer(OrderInputSerializer):
    """Validates the order update payload.

    ``status`` is optional; when given it must be a status name and it is
    applied as is.
    """

    status = serializers.ChoiceField(
        choices=OrderStatus.names,
        required=False,
        allow_null=True,
        error_messages={"invalid_choice": STATUS_MESSAGE},
    )


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class AddressSerializer(serializers.ModelSerializer):
    class Meta:
        model = Address
        fields = ["id", "address1", "address2", "city", "state", "zip"]
        read_only_fields = fields


class OrderLineSerializer(serializers.ModelSerializer):
    class Meta:
        model = OrderLine
        fields = ["id", "brand", "model", "cost", "quantity"]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders with nested address, lines and totals."""

    status = serializers.CharField(source="status_name", read_only=True)
    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    address = AddressSerializer(read_only=True)
    orderLines = OrderLineSerializer(source="order_lines", many=True, read_only=True)
    subtotal = serializers.DecimalField(
        max_digits=TOTAL_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        read_only=True,
    )
    total = serializers.DecimalField(
        max_digits=TOTAL_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        read_only=True,
    )

    class Meta:
        model = Order
        fields = [
            "id",
            "date",
            "status",
            "firstName",
            "lastName",
            "email",
            "phone",
            "address",
            "orderLines",
            "tax",
            "shipping",
            "subtotal",
            "total",
        ]
        read_only_fields = fields
