"""Requests and results of the discount operations."""

from dataclasses import dataclass

from discount.schemas.coupon import CouponModel


@dataclass(frozen=True)
class GetDiscountQuery:
    product_name: str


@dataclass(frozen=True)
class CreateDiscountCommand:
    product_name: str
    description: str
    amount: int


@dataclass(frozen=True)
class UpdateDiscountCommand:
    id: int
    product_name: str
    description: str
    amount: int


@dataclass(frozen=True)
class DeleteDiscountCommand:
    product_name: str


@dataclass(frozen=True)
class DiscountWriteResult:
    """Outcome of a create or update.

    ``coupon`` echoes the values that were written. ``success`` is false when
    the statement affected no row.
    """

    coupon: CouponModel
    success: bool


DISCOUNT_REQUEST_TYPES: tuple[type, ...] = (
    GetDiscountQuery,
    CreateDiscountCommand,
    UpdateDiscountCommand,
    DeleteDiscountCommand,
)
