"""Blocking client for ``DiscountProtoService``."""

import grpc

from discount.rpc.schema import (
    CouponMessage,
    CreateDiscountRequest,
    DeleteDiscountRequest,
    DeleteDiscountResponse,
    GetDiscountRequest,
    UpdateDiscountRequest,
    coupon_from_message,
    coupon_to_message,
    method_path,
)
from discount.schemas.coupon import CouponModel


class DiscountRpcClient:
    """Thin wrapper over a channel. ``grpc.RpcError`` is not caught."""

    def __init__(self, channel: grpc.Channel):
        self._get = channel.unary_unary(
            method_path("GetDiscount"),
            request_serializer=GetDiscountRequest.SerializeToString,
            response_deserializer=CouponMessage.FromString,
        )
        self._create = channel.unary_unary(
            method_path("CreateDiscount"),
            request_serializer=CreateDiscountRequest.SerializeToString,
            response_deserializer=CouponMessage.FromString,
        )
        self._update = channel.unary_unary(
            method_path("UpdateDiscount"),
            request_serializer=UpdateDiscountRequest.SerializeToString,
            response_deserializer=CouponMessage.FromString,
        )
        self._delete = channel.unary_unary(
            method_path("DeleteDiscount"),
            request_serializer=DeleteDiscountRequest.SerializeToString,
            response_deserializer=DeleteDiscountResponse.FromString,
        )

    def get_discount(self, product_name: str) -> CouponModel:
        return coupon_from_message(self._get(GetDiscountRequest(product_name=product_name)))

    def create_discount(self, product_name: str, description: str, amount: int) -> CouponModel:
        coupon = CouponModel(product_name=product_name, description=description, amount=amount)
        response = self._create(CreateDiscountRequest(coupon=coupon_to_message(coupon)))
        return coupon_from_message(response)

    def update_discount(self, coupon: CouponModel) -> CouponModel:
        response = self._update(UpdateDiscountRequest(coupon=coupon_to_message(coupon)))
        return coupon_from_message(response)

    def delete_discount(self, product_name: str) -> bool:
        return self._delete(DeleteDiscountRequest(product_name=product_name)).success
