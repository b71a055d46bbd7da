"""Discount repository for data access."""

from sqlalchemy import Engine, delete, insert, select, update

from discount.models.coupon import Coupon
from discount.schemas.coupon import CouponModel, no_discount


class DiscountRepository:
    """Repository for the coupon table.

    Every method runs exactly one statement on its own connection, acquired
    from the injected engine and released before returning. Write methods
    return ``False`` when no row was affected; database errors are not caught.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def get_discount(self, product_name: str) -> CouponModel:
        """Get the first coupon for a product, or the no-discount coupon."""
        stmt = (
            select(Coupon.id, Coupon.product_name, Coupon.description, Coupon.amount)
            .where(Coupon.product_name == product_name)
            .order_by(Coupon.id)
            .limit(1)
        )
        with self.engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()

        if row is None:
            return no_discount()
        return CouponModel(
            id=row["id"],
            product_name=row["product_name"],
            description=row["description"] or "",
            amount=row["amount"],
        )

    def create_discount(self, coupon: CouponModel) -> bool:
        """Insert a coupon. The id is assigned by the database."""
        stmt = insert(Coupon).values(
            product_name=coupon.product_name,
            description=coupon.description,
            amount=coupon.amount,
        )
        with self.engine.begin() as conn:
            affected = conn.execute(stmt).rowcount
        return affected > 0

    def update_discount(self, coupon: CouponModel) -> bool:
        """Overwrite the coupon whose id matches ``coupon.id``."""
        stmt = (
            update(Coupon)
            .where(Coupon.id == coupon.id)
            .values(
                product_name=coupon.product_name,
                description=coupon.description,
                amount=coupon.amount,
            )
        )
        with self.engine.begin() as conn:
            affected = conn.execute(stmt).rowcount
        return affected > 0

    def delete_discount(self, product_name: str) -> bool:
        """Delete every coupon for a product."""
        stmt = delete(Coupon).where(Coupon.product_name == product_name)
        with self.engine.begin() as conn:
            affected = conn.execute(stmt).rowcount
        return affected > 0
