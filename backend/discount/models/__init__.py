from discount.models.coupon import NO_DISCOUNT_DESCRIPTION, NO_DISCOUNT_PRODUCT_NAME, Coupon

__all__ = ["Coupon", "NO_DISCOUNT_DESCRIPTION", "NO_DISCOUNT_PRODUCT_NAME"]
