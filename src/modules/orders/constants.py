"""Order domain constants.

Defines status choices, the persisted status codes and the valid status
transitions for the order state machine.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    """Order lifecycle states.

    The value is the 4-character code stored in the database; the API
    always exposes the member name (``PROCESSING``, ``COMPLETED``...).
    """

    PROCESSING = "PROC", "Processing"
    COMPLETED = "COMP", "Completed"
    CANCELED = "CAN", "Canceled"

    @classmethod
    def from_name(cls, name: str) -> "OrderStatus":
        """Look up a status by its public name (``KeyError`` if unknown)."""
        return cls[name]


VALID_TRANSITIONS: dict[str, set[str]] = {
    OrderStatus.PROCESSING: {OrderStatus.COMPLETED, OrderStatus.CANCELED},
    OrderStatus.COMPLETED: set(),
    OrderStatus.CANCELED: set(),
}

TERMINAL_STATES: set[str] = {OrderStatus.COMPLETED, OrderStatus.CANCELED}

STATUS_CODE_LENGTH = 4

# Field limits (inclusive)
NAME_MAX_LENGTH = 25
EMAIL_MAX_LENGTH = 50
PHONE_MAX_LENGTH = 25
ADDRESS1_MAX_LENGTH = 50
ADDRESS2_MAX_LENGTH = 25
CITY_MAX_LENGTH = 25
STATE_LENGTH = 2
ZIP_MIN_LENGTH = 5
ZIP_MAX_LENGTH = 10
BRAND_MAX_LENGTH = 25
MODEL_MAX_LENGTH = 25
MONEY_DECIMAL_PLACES = 2
MONEY_MAX_DIGITS = 12
MONEY_MAX_VALUE = "9999999999.99"
# PositiveIntegerField upper bound on every supported database
QUANTITY_MAX = 2147483647
# Subtotal and total are unbounded sums of line totals
TOTAL_MAX_DIGITS = 40

# Allows every RFC 5322 local-part character except | and '.
EMAIL_PATTERN = r"^[a-zA-Z0-9_!#$%&*+/=?`{}~^.-]+@[a-zA-Z0-9.-]+$"

# 2134541324, (213) 454-1324, +111 (213) 454-1324, ...
PHONE_PATTERN = (
    r"^((\+\d{1,3}( )?)?((\(\d{3}\))|\d{3})[- .]?\d{3}[- .]?\d{4})?$"
)
