"""Order, Address, and OrderLine models.

Business rules implemented:
- Status is persisted as a 4-character code (``PROC``/``COMP``/``CAN``).
- Status transitions are only allowed out of PROCESSING (enforced at
  service layer through ``can_transition_to``).
- ``subtotal`` and ``total`` are derived, never stored: they are
  recomputed by ``calculate_totals`` each time they are read.
- Address and OrderLines are owned by exactly one Order.  Both relations
  use ``PROTECT`` so the database never cascades on its own; the
  repository removes owned rows explicitly.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.orders.calculator import OrderTotals, calculate_totals
from modules.orders.constants import (
    ADDRESS1_MAX_LENGTH,
    ADDRESS2_MAX_LENGTH,
    BRAND_MAX_LENGTH,
    CITY_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    MODEL_MAX_LENGTH,
    MONEY_DECIMAL_PLACES,
    MONEY_MAX_DIGITS,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    STATE_LENGTH,
    STATUS_CODE_LENGTH,
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    ZIP_MAX_LENGTH,
    OrderStatus,
)


class Address(BaseModel):
    """Billing/shipping address owned by a single order."""

    address1: models.CharField = models.CharField(max_length=ADDRESS1_MAX_LENGTH)
    address2: models.CharField = models.CharField(
        max_length=ADDRESS2_MAX_LENGTH, blank=True, default=""
    )
    city: models.CharField = models.CharField(max_length=CITY_MAX_LENGTH)
    state: models.CharField = models.CharField(max_length=STATE_LENGTH)
    zip: models.CharField = models.CharField(max_length=ZIP_MAX_LENGTH)

    class Meta:
        db_table = "addresses"

    def __str__(self) -> str:
        return f"{self.address1}, {self.city}, {self.state} {self.zip}"


class Order(BaseModel):
    """Order aggregate root.

    ``id`` is assigned by the database on first save and is the public
    identifier (``/orders/{id}``).  ``date`` records the creation day.
    """

    date: models.DateField = models.DateField(
        default=timezone.localdate, editable=False
    )
    status: models.CharField = models.CharField(
        max_length=STATUS_CODE_LENGTH,
        choices=OrderStatus.choices,
        default=OrderStatus.PROCESSING,
    )
    first_name: models.CharField = models.CharField(max_length=NAME_MAX_LENGTH)
    last_name: models.CharField = models.CharField(max_length=NAME_MAX_LENGTH)
    email: models.CharField = models.CharField(max_length=EMAIL_MAX_LENGTH)
    phone: models.CharField = models.CharField(
        max_length=PHONE_MAX_LENGTH, blank=True, default=""
    )
    address: models.OneToOneField = models.OneToOneField(
        "orders.Address",
        on_delete=models.PROTECT,
        related_name="order",
    )
    tax: models.DecimalField = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    shipping: models.DecimalField = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )

    class Meta:
        db_table = "orders"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
        ]

    # ------------------------------------------------------------------
    # State Machine helpers
    # ------------------------------------------------------------------

    @property
    def status_name(self) -> str:
        """Public name of the current status (``PROCESSING``...)."""
        return OrderStatus(self.status).name

    @property
    def is_terminal(self) -> bool:
        """Return ``True`` if the order is in a terminal state."""
        return self.status in TERMINAL_STATES

    def can_transition_to(self, new_status: str) -> bool:
        """Check whether transitioning to *new_status* is valid."""
        allowed = VALID_TRANSITIONS.get(self.status, set())
        return new_status in allowed

    # ------------------------------------------------------------------
    # Derived totals
    # ------------------------------------------------------------------

    @property
    def totals(self) -> OrderTotals:
        return calculate_totals(self.order_lines.all(), self.tax, self.shipping)

    @property
    def subtotal(self) -> Decimal:
        return self.totals.subtotal

    @property
    def total(self) -> Decimal:
        return self.totals.total

    # ------------------------------------------------------------------
    # Virtual full name
    # ------------------------------------------------------------------

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @full_name.setter
    def full_name(self, value: str) -> None:
        # A single word leaves last_name empty, which fails validation.
        parts = value.split(" ", 1)
        self.first_name = parts[0]
        self.last_name = parts[1] if len(parts) > 1 else ""

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"Order {self.pk} {self.full_name} ({self.status_name})"


class OrderLine(BaseModel):
    """Line item of an order.  Lines are listed in insertion order."""

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.PROTECT,
        related_name="order_lines",
    )
    brand: models.CharField = models.CharField(max_length=BRAND_MAX_LENGTH)
    model: models.CharField = models.CharField(max_length=MODEL_MAX_LENGTH)
    cost: models.DecimalField = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    quantity: models.PositiveIntegerField = models.PositiveIntegerField()

    class Meta:
        db_table = "order_lines"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.brand} {self.model} x{self.quantity} (${self.cost})"
