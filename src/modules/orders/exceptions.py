"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
problem responses.
"""

from __future__ import annotations


class OrderNotFound(Exception):
    """The requested order does not exist."""

    def __init__(self, order_id: object) -> None:
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


class InvalidOrderStatus(Exception):
    """A lifecycle action was attempted on an order that is not PROCESSING."""

    def __init__(self, action: str, status: str) -> None:
        self.action = action
        self.status = status
        super().__init__(f"Not allowed to {action} an order with status {status}")
