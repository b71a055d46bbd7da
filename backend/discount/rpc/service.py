"""gRPC servicer for the discount operations.

Mirrors the REST router: every method builds a typed request, sends it
through the mediator and converts the result back to a protobuf message.
Status codes follow gRPC conventions:

* missing fields, oversized coupon names -> ``INVALID_ARGUMENT`` (nothing is dispatched)
* update of an unknown id -> ``NOT_FOUND``
* insert that affected no row, database errors -> ``INTERNAL``
"""

import logging
from typing import Any

import grpc
from google.protobuf.message import Message
from sqlalchemy.exc import SQLAlchemyError

from discount.core.mediator import Mediator
from discount.models.coupon import PRODUCT_NAME_MAX_LENGTH
from discount.rpc.schema import (
    SERVICE_NAME,
    CouponMessage,
    CreateDiscountRequest,
    DeleteDiscountRequest,
    DeleteDiscountResponse,
    GetDiscountRequest,
    UpdateDiscountRequest,
    coupon_to_message,
)
from discount.services.discount_requests import (
    CreateDiscountCommand,
    DeleteDiscountCommand,
    DiscountWriteResult,
    GetDiscountQuery,
    UpdateDiscountCommand,
)

logger = logging.getLogger(__name__)


def _check_product_name(value: str, field: str, context: grpc.ServicerContext) -> None:
    if not value:
        context.abort(grpc.StatusCode.INVALID_ARGUMENT, f"{field} is required")


def _check_coupon(request: Message, context: grpc.ServicerContext) -> None:
    """Validate a coupon that is about to be written.

    Lookup and delete keys are not length-checked: an over-long name simply
    matches no row.
    """
    if not request.HasField("coupon"):
        context.abort(grpc.StatusCode.INVALID_ARGUMENT, "coupon is required")
    _check_product_name(request.coupon.product_name, "coupon.product_name", context)
    if len(request.coupon.product_name) > PRODUCT_NAME_MAX_LENGTH:
        context.abort(
            grpc.StatusCode.INVALID_ARGUMENT,
            f"coupon.product_name must be at most {PRODUCT_NAME_MAX_LENGTH} characters",
        )


class DiscountRpcService:
    def __init__(self, mediator: Mediator):
        self.mediator = mediator

    def _send(self, request: Any, context: grpc.ServicerContext) -> Any:
        try:
            return self.mediator.send(request)
        except SQLAlchemyError:
            logger.exception("Storage error handling %s", type(request).__name__)
            context.abort(grpc.StatusCode.INTERNAL, "Internal server error")

    def get_discount(self, request: Message, context: grpc.ServicerContext) -> Message:
        _check_product_name(request.product_name, "product_name", context)
        coupon = self._send(GetDiscountQuery(product_name=request.product_name), context)
        return coupon_to_message(coupon)

    def create_discount(self, request: Message, context: grpc.ServicerContext) -> Message:
        _check_coupon(request, context)
        result: DiscountWriteResult = self._send(
            CreateDiscountCommand(
                product_name=request.coupon.product_name,
                description=request.coupon.description,
                amount=request.coupon.amount,
            ),
            context,
        )
        if not result.success:
            context.abort(grpc.StatusCode.INTERNAL, "Discount could not be created")
        return coupon_to_message(result.coupon)

    def update_discount(self, request: Message, context: grpc.ServicerContext) -> Message:
        _check_coupon(request, context)
        result: DiscountWriteResult = self._send(
            UpdateDiscountCommand(
                id=request.coupon.id,
                product_name=request.coupon.product_name,
                description=request.coupon.description,
                amount=request.coupon.amount,
            ),
            context,
        )
        if not result.success:
            context.abort(grpc.StatusCode.NOT_FOUND, "Discount not found")
        return coupon_to_message(result.coupon)

    def delete_discount(self, request: Message, context: grpc.ServicerContext) -> Message:
        _check_product_name(request.product_name, "product_name", context)
        deleted = self._send(DeleteDiscountCommand(product_name=request.product_name), context)
        return DeleteDiscountResponse(success=deleted)


def discount_rpc_handler(mediator: Mediator) -> grpc.GenericRpcHandler:
    """Build the generic handler that serves ``DiscountProtoService``."""
    service = DiscountRpcService(mediator)
    return grpc.method_handlers_generic_handler(
        SERVICE_NAME,
        {
            "GetDiscount": grpc.unary_unary_rpc_method_handler(
                service.get_discount,
                request_deserializer=GetDiscountRequest.FromString,
                response_serializer=CouponMessage.SerializeToString,
            ),
            "CreateDiscount": grpc.unary_unary_rpc_method_handler(
                service.create_discount,
                request_deserializer=CreateDiscountRequest.FromString,
                response_serializer=CouponMessage.SerializeToString,
            ),
            "UpdateDiscount": grpc.unary_unary_rpc_method_handler(
                service.update_discount,
                request_deserializer=UpdateDiscountRequest.FromString,
                response_serializer=CouponMessage.SerializeToString,
            ),
            "DeleteDiscount": grpc.unary_unary_rpc_method_handler(
                service.delete_discount,
                request_deserializer=DeleteDiscountRequest.FromString,
                response_serializer=DeleteDiscountResponse.SerializeToString,
            ),
        },
    )
