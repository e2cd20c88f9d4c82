"""WebSocket server pushing parsed makemkvcon output to clients."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Callable, Sequence

from aiohttp import web

from makemkvserver.outputs import JsonWrapper
from makemkvserver.parser import ParseError, parse

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
EVENTS_PATH = "/events"
DEFAULT_PROBE_LINE = "test"

LINE_SOURCE = web.AppKey("line_source", Callable[[], str])
INTERVAL = web.AppKey("interval", float)


async def events_handler(request: web.Request) -> web.WebSocketResponse:
    """Send one parsed output line to the client on every tick.

    The connection is closed when a line cannot be parsed or the client
    can no longer be written to.
    """
    ws = web.WebSocketResponse()
    await ws.prepare(request)
    interval = request.app[INTERVAL]
    source = request.app[LINE_SOURCE]
    try:
        while not ws.closed:
            await asyncio.sleep(interval)
            try:
                output = parse(source())
            except ParseError as exc:
                logger.warning("parse error: %s", exc)
                break
            try:
                await ws.send_str(JsonWrapper.wrap(output).to_json())
            except ConnectionError as exc:
                logger.info("write error: %s", exc)
                break
    finally:
        await ws.close()
    return ws


def create_app() -> web.Application:
    """Build the application serving the events endpoint."""
    app = web.Application()
    app[LINE_SOURCE] = lambda: DEFAULT_PROBE_LINE
    app[INTERVAL] = 1.0
    app.router.add_get(EVENTS_PATH, events_handler)
    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Start the WebSocket server."""
    arg_parser = argparse.ArgumentParser(description="Serve makemkvcon output over WebSocket.")
    arg_parser.add_argument("--host", default=None, help="interface to listen on (default: all)")
    arg_parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = arg_parser.parse_args(argv)

    print(f"WebSocket server started on {args.host or ''}:{args.port}")
    web.run_app(create_app(), host=args.host, port=args.port, print=None)