"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.

- Validation failures -> 400 with a flat ``{field_path: message}`` body.
- ``OrderNotFound`` -> 404 problem body.
- ``InvalidOrderStatus`` -> 405 problem body.
"""

from __future__ import annotations

from typing import Dict

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.responses import problem_response
from modules.orders.assembler import self_href, to_collection_model, to_model
from modules.orders.dtos import OrderDTO
from modules.orders.exceptions import InvalidOrderStatus, OrderNotFound
from modules.orders.models import Order
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.serializers import (
    OrderInputSerializer,
    OrderSerializer,
    OrderUpdateSerializer,
    flatten_errors,
)
from modules.orders.services import OrderService

TRANSITION_NOTES = (
    "Orders with status set to PROCESSING will contain links to change "
    "status to COMPLETED and CANCELED. Status cannot be changed if it is "
    "set to COMPLETED or CANCELED."
)


def _base_url(request: Request) -> str:
    return request.build_absolute_uri("/").rstrip("/")


def _not_found(exc: OrderNotFound) -> Response:
    return problem_response("Not found", str(exc), status.HTTP_404_NOT_FOUND)


def _not_allowed(exc: InvalidOrderStatus) -> Response:
    return problem_response(
        "Method not allowed", str(exc), status.HTTP_405_METHOD_NOT_ALLOWED
    )


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with an injected repository (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    # Used by schema generation only; reads go through the service.
    queryset = Order.objects.none()
    serializer_class = OrderSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(order_repository=OrderDjangoRepository())

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def _order_dto(
        self, request: Request, serializer_class: type[OrderInputSerializer]
    ) -> tuple[OrderDTO | None, Dict[str, str]]:
        """Validate the payload; return ``(dto, {})`` or ``(None, errors)``."""
        serializer = serializer_class(data=request.data)
        if not serializer.is_valid():
            return None, flatten_errors(serializer.errors)
        return OrderDTO.from_validated_data(serializer.validated_data), {}

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(summary="Retrieves all orders", description=TRANSITION_NOTES)
    def list(self, request: Request) -> Response:
        """GET /orders"""
        orders = self._service.list_orders()
        return Response(to_collection_model(orders, _base_url(request)))

    @extend_schema(
        summary="Retrieves the order with the id",
        description=TRANSITION_NOTES,
    )
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /orders/{pk}"""
        try:
            order = self._service.get_order(int(pk))
        except OrderNotFound as exc:
            return _not_found(exc)
        return Response(to_model(order, _base_url(request)))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Creates an order",
        description="All orders are created with status set to PROCESSING.",
        request=OrderInputSerializer,
    )
    def create(self, request: Request) -> Response:
        """POST /orders"""
        dto, errors = self._order_dto(request, OrderInputSerializer)
        if errors:
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)

        order = self._service.create_order(dto)
        body = to_model(order, _base_url(request))
        return Response(
            body,
            status=status.HTTP_201_CREATED,
            headers={"Location": self_href(body)},
        )

    @extend_schema(
        summary="Updates the order with the id",
        description=(
            "Replaces status, first name, last name, address and order "
            "lines. The status is taken from the request as is."
        ),
        request=OrderUpdateSerializer,
    )
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /orders/{pk}"""
        dto, errors = self._order_dto(request, OrderUpdateSerializer)
        if errors:
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            order = self._service.update_order(int(pk), dto)
        except OrderNotFound as exc:
            return _not_found(exc)

        body = to_model(order, _base_url(request))
        return Response(
            body,
            status=status.HTTP_201_CREATED,
            headers={"Location": self_href(body)},
        )

    @extend_schema(summary="Removes the order with the id")
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /orders/{pk}"""
        try:
            self._service.delete_order(int(pk))
        except OrderNotFound as exc:
            return _not_found(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Status transitions
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Changes the status of the order from PROCESSING to CANCELED",
        description="If the status is not set to PROCESSING, this method is not allowed.",
        request=None,
    )
    @action(detail=True, methods=["put"])
    def cancel(self, request: Request, pk: str | None = None) -> Response:
        """PUT /orders/{pk}/cancel"""
        try:
            order = self._service.cancel_order(int(pk))
        except OrderNotFound as exc:
            return _not_found(exc)
        except InvalidOrderStatus as exc:
            return _not_allowed(exc)
        return Response(to_model(order, _base_url(request)))

    @extend_schema(
        summary="Changes the status of the order from PROCESSING to COMPLETED",
        description="If the status is not set to PROCESSING, this method is not allowed.",
        request=None,
    )
    @action(detail=True, methods=["put"])
    def complete(self, request: Request, pk: str | None = None) -> Response:
        """PUT /orders/{pk}/complete"""
        try:
            order = self._service.complete_order(int(pk))
        except OrderNotFound as exc:
            return _not_found(exc)
        except InvalidOrderStatus as exc:
            return _not_allowed(exc)
        return Response(to_model(order, _base_url(request)))
