"""Hypermedia representation of orders.

Links are a pure function of the order identifier, its status and the
base URL of the service: every order links to itself and to the
collection, and a PROCESSING order also advertises its ``cancel`` and
``complete`` actions.  A client can discover the valid next actions
from the presence or absence of those link names alone.

Representations follow HAL: links live under ``_links`` as
``{"rel": {"href": url}}`` and collections embed their items under
``_embedded``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

from modules.orders.constants import OrderStatus
from modules.orders.models import Order
from modules.orders.serializers import OrderSerializer

ORDERS_PATH = "/orders"

Links = Dict[str, Dict[str, str]]


def collection_url(base_url: str) -> str:
    return f"{base_url.rstrip('/')}{ORDERS_PATH}"


def order_url(base_url: str, order_id: int, action: str = "") -> str:
    url = f"{collection_url(base_url)}/{order_id}"
    return f"{url}/{action}" if action else url


def build_links(order_id: int, status: str, base_url: str) -> Links:
    """Return the link set of an order in *status* (a stored status code)."""
    links: Links = {
        "self": {"href": order_url(base_url, order_id)},
        "orders": {"href": collection_url(base_url)},
    }
    if status == OrderStatus.PROCESSING:
        links["cancel"] = {"href": order_url(base_url, order_id, "cancel")}
        links["complete"] = {"href": order_url(base_url, order_id, "complete")}
    return links


def to_model(order: Order, base_url: str) -> Dict[str, Any]:
    """Serialized order plus its ``_links``."""
    data = dict(OrderSerializer(order).data)
    data["_links"] = build_links(order.pk, order.status, base_url)
    return data


def to_collection_model(orders: Iterable[Order], base_url: str) -> Dict[str, Any]:
    return {
        "_embedded": {"orders": [to_model(order, base_url) for order in orders]},
        "_links": {"self": {"href": collection_url(base_url)}},
    }


def self_href(model: Dict[str, Any]) -> str:
    return model["_links"]["self"]["href"]
