"""Process entry point: bind the listener and serve the application.

Usage:
    welcome-api
    python -m welcome_api

The port comes from the ``PORT`` environment variable (default 3000).
"""
from __future__ import annotations

import logging
import socket

import click
from flask import Flask
from werkzeug.serving import BaseWSGIServer, make_server, select_address_family

from . import create_app

logger = logging.getLogger(__name__)


def build_server(app: Flask, host: str, port: int) -> BaseWSGIServer:
    """Bind a threaded WSGI server for ``app``.

    The listening socket is opened here rather than by werkzeug, so a port
    that cannot be bound raises ``OSError`` to the caller.
    """
    family = select_address_family(host, port)
    with socket.create_server((host, port), family=family) as sock:
        # werkzeug duplicates the descriptor; this copy can be closed.
        return make_server(host, port, app, threaded=True, fd=sock.fileno())


@click.command()
def main() -> None:
    """Start the Welcome API server."""
    try:
        app = create_app()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise click.ClickException(str(exc)) from exc

    host = app.config["HOST"]
    port = app.config["PORT"]

    try:
        server = build_server(app, host, port)
    except OSError as exc:
        logger.error("Unable to bind %s:%s: %s", host, port, exc)
        raise click.ClickException(f"Unable to bind port {port}: {exc}") from exc

    click.echo(f"Server is running on port {server.port}")
    # Returns on Ctrl+C after closing the socket.
    server.serve_forever()
