"""Liveness endpoint for external uptime checks."""

import logging

from aiohttp import web

from config.constants import HEALTH_RESPONSE

logger = logging.getLogger(__name__)


async def handle_root(request: web.Request) -> web.Response:
    return web.Response(text=HEALTH_RESPONSE)


def create_app() -> web.Application:
    """Build the liveness application (``GET /``)."""
    app = web.Application()
    app.router.add_get("/", handle_root)
    return app


async def start_health_server(port: int) -> web.AppRunner:
    """Serve the liveness endpoint on the running event loop.

    Args:
        port: TCP port to listen on (all interfaces).

    Returns:
        The runner, to be cleaned up on shutdown.
    """
    runner = web.AppRunner(create_app())
    await runner.setup()
    site = web.TCPSite(runner, host="0.0.0.0", port=port)
    await site.start()
    logger.info(f"Health server running on port {port}")
    return runner
