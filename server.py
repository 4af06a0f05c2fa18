#!/usr/bin/env python3
"""
Cookie probe server: HTTP cookie endpoints and the WebSocket handshake
on one port.

Usage:
    python server.py              # start on $PORT, default 3000
    python server.py --port 8080  # custom port
"""

import argparse
import os

from dotenv import load_dotenv

load_dotenv()

from cookieprobe.config import Settings


def main(argv: list[str] | None = None) -> None:
    import uvicorn

    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="WebSocket cookie probe server")
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--host", default=settings.host)
    args = parser.parse_args(argv)

    # The app reads its settings from the environment when uvicorn imports it
    os.environ["PORT"] = str(args.port)
    os.environ["HOST"] = args.host

    uvicorn.run("api.main:app", host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
