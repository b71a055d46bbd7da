import logging
from concurrent import futures

import grpc

from discount.core import database
from discount.core.config import settings
from discount.core.dependencies import build_mediator
from discount.core.logging import configure_logging
from discount.core.mediator import Mediator
from discount.repositories.discount_repository import DiscountRepository
from discount.rpc.service import discount_rpc_handler

logger = logging.getLogger(__name__)


def create_server(
    mediator: Mediator,
    address: str = settings.rpc_address,
    max_workers: int = settings.RPC_MAX_WORKERS,
) -> tuple[grpc.Server, int]:
    """Create an unstarted gRPC server and return it with its bound port."""
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers))
    server.add_generic_rpc_handlers((discount_rpc_handler(mediator),))
    port = server.add_insecure_port(address)
    return server, port


def serve() -> None:
    configure_logging(settings.LOG_LEVEL)
    database.init_db()
    mediator = build_mediator(DiscountRepository(database.get_engine()))
    server, port = create_server(mediator)
    server.start()
    logger.info("Discount RPC server listening on port %d", port)
    server.wait_for_termination()


def main() -> None:
    serve()


if __name__ == "__main__":
    main()
