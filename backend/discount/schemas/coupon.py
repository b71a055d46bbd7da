"""Coupon schemas shared by the REST surface and the operation handlers."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from discount.models.coupon import (
    INT32_MAX,
    INT32_MIN,
    NO_DISCOUNT_DESCRIPTION,
    NO_DISCOUNT_PRODUCT_NAME,
    PRODUCT_NAME_MAX_LENGTH,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CouponModel(_CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = 0
    product_name: str
    description: str = ""
    amount: int = 0


class CouponCreate(_CamelModel):
    product_name: str = Field(min_length=1, max_length=PRODUCT_NAME_MAX_LENGTH)
    description: str = ""
    amount: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)


class CouponUpdate(_CamelModel):
    id: int = Field(ge=INT32_MIN, le=INT32_MAX)
    product_name: str = Field(min_length=1, max_length=PRODUCT_NAME_MAX_LENGTH)
    description: str = ""
    amount: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)


def no_discount() -> CouponModel:
    """Coupon returned for products without a discount row."""
    return CouponModel(
        id=0,
        product_name=NO_DISCOUNT_PRODUCT_NAME,
        description=NO_DISCOUNT_DESCRIPTION,
        amount=0,
    )
