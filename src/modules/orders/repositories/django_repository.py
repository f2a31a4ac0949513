"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
All write operations are wrapped in ``transaction.atomic()`` so the
Order aggregate (Order + Address + OrderLines) is written or removed
as one unit.

The database never cascades on its own (owned rows are referenced
with ``PROTECT``): every removal of an address or line happens here,
explicitly, before or together with its order.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import structlog
from django.db import transaction
from django.db.models import QuerySet

from modules.orders.dtos import AddressDTO, OrderDTO, OrderLineDTO
from modules.orders.models import Address, Order, OrderLine
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    def _queryset(self) -> QuerySet:
        return Order.objects.select_related("address").prefetch_related(
            "order_lines"
        )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Optional[Order]:
        """Retrieve an order with its address and lines eager-loaded.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return self._queryset().filter(pk=id).first()
        except (TypeError, ValueError):
            return None

    def list(self) -> List[Order]:
        return list(self._queryset())

    # ------------------------------------------------------------------
    # Create / Replace (aggregate root + owned rows)
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, dto: OrderDTO, status: str) -> Order:
        order = Order.objects.create(
            status=status,
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
            phone=dto.phone,
            address=self._create_address(dto.address),
            tax=dto.tax,
            shipping=dto.shipping,
        )
        self._add_lines(order, dto.order_lines)

        logger.info(
            "order.persisted", order_id=order.pk, line_count=len(dto.order_lines)
        )
        return self.get_by_id(order.pk)

    @transaction.atomic
    def replace(self, order: Order, dto: OrderDTO) -> Order:
        previous_address = order.address

        if dto.status is not None:
            order.status = dto.status
        order.first_name = dto.first_name
        order.last_name = dto.last_name
        order.address = self._create_address(dto.address)
        order.save()
        previous_address.delete()

        # Same order, same relation: clear then repopulate.
        removed, _ = OrderLine.objects.filter(order=order).delete()
        self._add_lines(order, dto.order_lines)

        logger.info(
            "order.replaced",
            order_id=order.pk,
            removed_lines=removed,
            line_count=len(dto.order_lines),
        )
        return self.get_by_id(order.pk)

    # ------------------------------------------------------------------
    # Save / Delete (IRepository contract)
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist scalar changes (e.g. status) of an existing order."""
        entity.save()
        logger.info("order.saved", order_id=entity.pk, status=entity.status)
        return entity

    @transaction.atomic
    def delete(self, entity: Order) -> None:
        """Delete the order, its lines and its address."""
        order_id = entity.pk
        address_id = entity.address_id

        OrderLine.objects.filter(order_id=order_id).delete()
        entity.delete()
        Address.objects.filter(pk=address_id).delete()

        logger.info("order.deleted", order_id=order_id, address_id=address_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _create_address(dto: AddressDTO) -> Address:
        return Address.objects.create(**dto.model_dump())

    @staticmethod
    def _add_lines(order: Order, lines: Iterable[OrderLineDTO]) -> None:
        for line in lines:
            OrderLine.objects.create(
                order=order,
                brand=line.brand,
                model=line.model,
                cost=line.cost,
                quantity=line.quantity,
            )
