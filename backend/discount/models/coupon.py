"""Coupon model for per-product discounts."""

from sqlalchemy import Column, Integer, String, Text

from discount.core.database import Base

# Values rendered when a product has no coupon row
NO_DISCOUNT_PRODUCT_NAME = "No Discount"
NO_DISCOUNT_DESCRIPTION = "No Discount Available"

PRODUCT_NAME_MAX_LENGTH = 255

# id and amount travel as int32 over RPC
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class Coupon(Base):
    """Coupon model for per-product discounts.

    ``product_name`` is only indexed; uniqueness is left to the deployed schema.
    """

    __tablename__ = "coupon"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_name = Column(String(PRODUCT_NAME_MAX_LENGTH), index=True, nullable=False)
    description = Column(Text, nullable=True)
    amount = Column(Integer, nullable=False, default=0)
