from functools import lru_cache

from discount.core import database
from discount.core.mediator import Mediator
from discount.repositories.discount_repository import DiscountRepository
from discount.services.discount_handlers import (
    CreateDiscountCommandHandler,
    DeleteDiscountCommandHandler,
    GetDiscountQueryHandler,
    UpdateDiscountCommandHandler,
)
from discount.services.discount_requests import (
    DISCOUNT_REQUEST_TYPES,
    CreateDiscountCommand,
    DeleteDiscountCommand,
    GetDiscountQuery,
    UpdateDiscountCommand,
)


def build_mediator(repository: DiscountRepository) -> Mediator:
    """Register one handler per discount request type.

    Raises ``HandlerRegistrationError`` if the table ends up incomplete.
    """
    mediator = Mediator()
    mediator.register(GetDiscountQuery, GetDiscountQueryHandler(repository))
    mediator.register(CreateDiscountCommand, CreateDiscountCommandHandler(repository))
    mediator.register(UpdateDiscountCommand, UpdateDiscountCommandHandler(repository))
    mediator.register(DeleteDiscountCommand, DeleteDiscountCommandHandler(repository))
    mediator.verify(DISCOUNT_REQUEST_TYPES)
    return mediator


@lru_cache
def get_mediator() -> Mediator:
    """Process-wide mediator bound to the configured engine."""
    return build_mediator(DiscountRepository(database.get_engine()))
