"""Entrypoint that serves the greeter on 0.0.0.0 at the port read from PORT."""
import logging

import uvicorn

from app.config import HOST, Settings, settings
from app.main import app

logger = logging.getLogger(__name__)


def main(config: Settings = settings) -> None:
    """Bind the listener, announce the port, then serve until terminated."""
    server_config = uvicorn.Config(app, host=HOST, port=config.port, log_level="info")
    # Exits non-zero when the address cannot be bound
    sock = server_config.bind_socket()

    logger.info(f"Server is running on port {config.port}")

    uvicorn.Server(server_config).run(sockets=[sock])


if __name__ == "__main__":
    main()
