# Run from project root: python -m app.main --socket /run/guest/volumes-service.sock

import argparse
import logging
import sys

import uvicorn
from fastapi import FastAPI

from app.api.routes import router
from app.core.config import DEFAULT_SOCKET_PATH, LOG_LEVEL
from app.core.errors import ListenerError
from app.core.listener import bind_unix_socket
from app.core.random_source import get_random_source

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)


app = FastAPI(title="Volumes Service")
app.include_router(router)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Store vcluster values over a unix domain socket.")
    parser.add_argument(
        "--socket",
        default=DEFAULT_SOCKET_PATH,
        help=f"Unix domain socket to listen on (default: {DEFAULT_SOCKET_PATH})",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL.lower(),
        choices=["critical", "error", "warning", "info", "debug"],
        help="log level for the service and uvicorn",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.getLogger().setLevel(args.log_level.upper())
    logger.info("Starting listening on %s", args.socket)
    try:
        sock = bind_unix_socket(args.socket)
    except ListenerError as e:
        logger.error("Failed to start listener: %s", e)
        sys.exit(1)
    # seed the shared random source before the first request
    get_random_source()
    config = uvicorn.Config(app, log_level=args.log_level)
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


if __name__ == "__main__":
    main()
