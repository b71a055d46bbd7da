"""Handlers for the discount operations.

Each handler translates its request into exactly one repository call and
logs the outcome. Database errors are left to the transport layer.
"""

import logging

from discount.repositories.discount_repository import DiscountRepository
from discount.schemas.coupon import CouponModel
from discount.services.discount_requests import (
    CreateDiscountCommand,
    DeleteDiscountCommand,
    DiscountWriteResult,
    GetDiscountQuery,
    UpdateDiscountCommand,
)

logger = logging.getLogger(__name__)


class GetDiscountQueryHandler:
    def __init__(self, repository: DiscountRepository):
        self.repository = repository

    def __call__(self, query: GetDiscountQuery) -> CouponModel:
        coupon = self.repository.get_discount(query.product_name)
        logger.info(
            "Discount retrieved for product %s, amount: %d", query.product_name, coupon.amount
        )
        return coupon


class CreateDiscountCommandHandler:
    def __init__(self, repository: DiscountRepository):
        self.repository = repository

    def __call__(self, command: CreateDiscountCommand) -> DiscountWriteResult:
        coupon = CouponModel(
            product_name=command.product_name,
            description=command.description,
            amount=command.amount,
        )
        created = self.repository.create_discount(coupon)
        if created:
            logger.info(
                "Discount created for product %s, amount: %d", command.product_name, command.amount
            )
        else:
            logger.warning("Discount for product %s was not created", command.product_name)
        return DiscountWriteResult(coupon=coupon, success=created)


class UpdateDiscountCommandHandler:
    def __init__(self, repository: DiscountRepository):
        self.repository = repository

    def __call__(self, command: UpdateDiscountCommand) -> DiscountWriteResult:
        coupon = CouponModel(
            id=command.id,
            product_name=command.product_name,
            description=command.description,
            amount=command.amount,
        )
        updated = self.repository.update_discount(coupon)
        if updated:
            logger.info(
                "Discount updated for product %s, amount: %d", command.product_name, command.amount
            )
        else:
            logger.warning(
                "Discount %d for product %s not found, nothing updated",
                command.id,
                command.product_name,
            )
        return DiscountWriteResult(coupon=coupon, success=updated)


class DeleteDiscountCommandHandler:
    def __init__(self, repository: DiscountRepository):
        self.repository = repository

    def __call__(self, command: DeleteDiscountCommand) -> bool:
        deleted = self.repository.delete_discount(command.product_name)
        logger.info(
            "Discount deletion for product %s was %s",
            command.product_name,
            "successful" if deleted else "unsuccessful",
        )
        return deleted
