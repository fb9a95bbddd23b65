"""Run the Principia API server: ``python -m principia.api.main [config.yaml]``."""

from __future__ import annotations

import sys

import uvicorn

from ..config import load_config
from ..infra.logging import configure_logging, get_logger
from .app import create_app


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    config = load_config(argv[0] if argv else None)
    configure_logging(config.server.log_level, config.server.json_logs)
    get_logger(__name__).info("starting_server", host=config.server.host, port=config.server.port)
    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
