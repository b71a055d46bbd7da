"""Discount API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from discount.core.dependencies import get_mediator
from discount.core.mediator import Mediator
from discount.schemas.coupon import CouponCreate, CouponModel, CouponUpdate
from discount.services.discount_requests import (
    CreateDiscountCommand,
    DeleteDiscountCommand,
    DiscountWriteResult,
    GetDiscountQuery,
    UpdateDiscountCommand,
)

router = APIRouter()


@router.get(
    "/{product_name}",
    name="get_discount",
    response_model=CouponModel,
    summary="Get discount",
    description="Get the discount for a product. Products without one get the no-discount coupon.",
)
def get_discount(
    product_name: str,
    mediator: Mediator = Depends(get_mediator),
) -> CouponModel:
    return mediator.send(GetDiscountQuery(product_name=product_name))


@router.post(
    "",
    response_model=CouponModel,
    status_code=201,
    summary="Create discount",
    responses={
        422: {"description": "Validation error"},
        500: {"description": "Discount could not be created"},
    },
)
def create_discount(
    data: CouponCreate,
    request: Request,
    response: Response,
    mediator: Mediator = Depends(get_mediator),
) -> CouponModel:
    """Create a new discount and point ``Location`` at its lookup route."""
    result: DiscountWriteResult = mediator.send(
        CreateDiscountCommand(
            product_name=data.product_name,
            description=data.description,
            amount=data.amount,
        )
    )
    if not result.success:
        raise HTTPException(status_code=500, detail="Discount could not be created")
    response.headers["Location"] = str(
        request.url_for("get_discount", product_name=data.product_name)
    )
    return result.coupon


@router.put(
    "",
    response_model=CouponModel,
    summary="Update discount",
    responses={
        404: {"description": "Discount not found"},
        422: {"description": "Validation error"},
    },
)
def update_discount(
    data: CouponUpdate,
    mediator: Mediator = Depends(get_mediator),
) -> CouponModel:
    """Update the discount with the given id."""
    result: DiscountWriteResult = mediator.send(
        UpdateDiscountCommand(
            id=data.id,
            product_name=data.product_name,
            description=data.description,
            amount=data.amount,
        )
    )
    if not result.success:
        raise HTTPException(status_code=404, detail="Discount not found")
    return result.coupon


@router.delete(
    "/{product_name}",
    response_model=bool,
    summary="Delete discount",
    description="Delete the discounts of a product. Returns false when there was none.",
)
def delete_discount(
    product_name: str,
    mediator: Mediator = Depends(get_mediator),
) -> bool:
    return mediator.send(DeleteDiscountCommand(product_name=product_name))
