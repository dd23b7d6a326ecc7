"""Simple launcher for the kinroute HTTP service.

Configures logging from the environment, then serves the FastAPI
application with uvicorn.
"""

from __future__ import annotations

import argparse

import uvicorn

from kinroute.api import create_app
from kinroute.observability import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the kinroute API server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    configure_logging()
    uvicorn.run(create_app(), host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
