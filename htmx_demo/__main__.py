"""
Run the demo server.

    python -m htmx_demo --port 3000

Then open http://127.0.0.1:3000/ (contact form) or /counter.
"""

from __future__ import annotations

import argparse
import logging

import uvicorn

from htmx_demo.main import create_app
from htmx_demo.settings import get_settings

logger = logging.getLogger("htmx_demo")


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    p = argparse.ArgumentParser(prog="htmx_demo", description="htmx response headers demo server")
    p.add_argument("--host", default=settings.host)
    p.add_argument("--port", type=int, default=settings.port)
    p.add_argument("--log-level", default=settings.log_level, help="DEBUG, INFO, WARNING, ...")
    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    settings = get_settings().model_copy(
        update={"host": args.host, "port": args.port, "log_level": args.log_level.upper()}
    )
    app = create_app(settings)

    logger.info("Listening on http://%s:%d", settings.host, settings.port)
    # log_config=None keeps the handlers configure_logging() installed.
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower(), log_config=None)


if __name__ == "__main__":
    main()
