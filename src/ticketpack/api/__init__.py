"""FastAPI application for ticketpack."""

from ticketpack.api.app import create_app

__all__ = ["create_app"]
