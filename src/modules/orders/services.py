"""Order service layer (Use Cases).

Orchestrates lookup, mutation and persistence of orders.  All state
changes go through the repository, which defines the unit-of-work
boundary for the Order aggregate.

Business rules enforced:
- Creation always starts an order in PROCESSING, whatever the client sent.
- Cancel/complete are only allowed from PROCESSING; COMPLETED and
  CANCELED are terminal.
- Update (PUT) replaces status, names, address and lines and trusts the
  client-supplied status: no transition rule is applied there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.orders.constants import OrderStatus
from modules.orders.exceptions import InvalidOrderStatus, OrderNotFound

if TYPE_CHECKING:
    from modules.orders.dtos import OrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives the repository via constructor injection (DIP).
    """

    def __init__(self, order_repository: IOrderRepository) -> None:
        self._order_repo = order_repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_orders(self) -> List[Order]:
        return self._order_repo.list()

    def get_order(self, order_id: int) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(order_id)
        return order

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: OrderDTO) -> Order:
        """Create an order; the supplied status is discarded."""
        if dto.status not in (None, OrderStatus.PROCESSING):
            logger.info("order.status_overridden", requested_status=dto.status)

        order = self._order_repo.create(dto, status=OrderStatus.PROCESSING)
        logger.info("order.created", order_id=order.pk)
        return order

    def update_order(self, order_id: int, dto: OrderDTO) -> Order:
        """Replace an existing order's status, names, address and lines.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self.get_order(order_id)
        log = logger.bind(order_id=order_id, old_status=order.status)

        order = self._order_repo.replace(order, dto)

        log.info("order.updated", new_status=order.status)
        return order

    def delete_order(self, order_id: int) -> None:
        """Delete an order together with its address and lines.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self.get_order(order_id)
        self._order_repo.delete(order)
        logger.info("order.removed", order_id=order_id)

    def cancel_order(self, order_id: int) -> Order:
        """PROCESSING -> CANCELED.

        Raises:
            OrderNotFound: order does not exist.
            InvalidOrderStatus: the order is not PROCESSING.
        """
        return self._transition(order_id, OrderStatus.CANCELED, action="cancel")

    def complete_order(self, order_id: int) -> Order:
        """PROCESSING -> COMPLETED.

        Raises:
            OrderNotFound: order does not exist.
            InvalidOrderStatus: the order is not PROCESSING.
        """
        return self._transition(order_id, OrderStatus.COMPLETED, action="complete")

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def _transition(self, order_id: int, new_status: str, action: str) -> Order:
        order = self.get_order(order_id)
        log = logger.bind(
            order_id=order_id,
            current_status=order.status_name,
            new_status=OrderStatus(new_status).name,
        )

        if not order.can_transition_to(new_status):
            log.warning("order.invalid_transition", action=action)
            raise InvalidOrderStatus(action, order.status_name)

        order.status = new_status
        order = self._order_repo.save(order)

        log.info(f"order.{OrderStatus(new_status).name.lower()}")
        return order
