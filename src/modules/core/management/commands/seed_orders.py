from __future__ import annotations

from decimal import Decimal

import structlog
from django.core.management.base import BaseCommand

from modules.orders.constants import OrderStatus
from modules.orders.dtos import AddressDTO, OrderDTO, OrderLineDTO
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.services import OrderService

logger = structlog.get_logger(__name__)

SEED_ORDERS = [
    {
        "status": OrderStatus.PROCESSING,
        "first_name": "Albert",
        "last_name": "Einstein",
        "email": "albert.einstein@example.com",
        "address": ("2213 Camelback Rd", "Apt 2", "Phoenix", "AZ", "85017"),
        "lines": [("Apple", "Phone", "1000", 1), ("Apple", "Tablet", "5000", 2)],
        "tax": "200",
        "shipping": "300",
    },
    {
        "status": OrderStatus.COMPLETED,
        "first_name": "Stephen",
        "last_name": "Hawking",
        "email": "stephen.hawking@example.com",
        "address": ("4200 Wilshire Blvd", "", "Los Angeles", "CA", "90025"),
        "lines": [
            ("Samsung", "Watch", "3500", 1),
            ("Emerson", "TV", "8000", 1),
            ("Apple", "Laptop", "2000", 1),
        ],
        "tax": "300",
        "shipping": "500",
    },
    {
        "status": OrderStatus.CANCELED,
        "first_name": "Nikola",
        "last_name": "Tesla",
        "email": "nikola.tesla@example.com",
        "address": ("4545 Wilshire Blvd", "Apt 3", "Los Angeles", "CA", "90025"),
        "lines": [("LG", "Phone", "1200", 1)],
        "tax": "100",
        "shipping": "200",
    },
]


def _dto(seed: dict) -> OrderDTO:
    address1, address2, city, state, zip_code = seed["address"]
    return OrderDTO(
        first_name=seed["first_name"],
        last_name=seed["last_name"],
        email=seed["email"],
        address=AddressDTO(
            address1=address1,
            address2=address2,
            city=city,
            state=state,
            zip=zip_code,
        ),
        order_lines=[
            OrderLineDTO(brand=brand, model=model, cost=Decimal(cost), quantity=qty)
            for brand, model, cost, qty in seed["lines"]
        ],
        tax=Decimal(seed["tax"]),
        shipping=Decimal(seed["shipping"]),
    )


class Command(BaseCommand):
    help = "Preload the database with sample orders (one per status)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Seed even when orders already exist.",
        )

    def handle(self, *args, **options):
        repository = OrderDjangoRepository()
        if repository.list() and not options["force"]:
            self.stdout.write("Orders already present, skipping seed.")
            return

        service = OrderService(order_repository=repository)
        created = 0
        for seed in SEED_ORDERS:
            order = service.create_order(_dto(seed))
            if seed["status"] == OrderStatus.COMPLETED:
                order = service.complete_order(order.pk)
            elif seed["status"] == OrderStatus.CANCELED:
                order = service.cancel_order(order.pk)
            logger.info("seed.order_preloaded", order_id=order.pk, status=order.status_name)
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Seed completed: orders={created}"))
