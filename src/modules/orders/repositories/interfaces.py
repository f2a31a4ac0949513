"""Order repository interface.

Extends ``IRepository[Order]`` with the aggregate-level writes the
Order needs: creation and replacement of an order together with the
Address and OrderLines it owns.

Ownership is part of the contract: ``delete`` must remove the order's
lines and address in the same unit of work, and ``replace`` must never
leave the previous address or lines behind.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.dtos import OrderDTO
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def create(self, dto: OrderDTO, status: str) -> Order:
        """Persist a new order, its address and its lines atomically.

        The storage assigns the order (and line) identifiers.
        """

    @abstractmethod
    def replace(self, order: Order, dto: OrderDTO) -> Order:
        """Overwrite status, names, address and lines of *order* in place.

        The existing lines are removed and new ones created on the same
        order; the previous address row is removed as well.  Fields of
        *dto* with no counterpart in the update contract are ignored.
        """
