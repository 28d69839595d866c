"""Ping utility used by the API health-check."""

from flask import current_app


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def get_service_name() -> str:
    return current_app.config["SERVICE_NAME"]
