"""Enquiries API package."""

from enquiries.api.routes import build_router

__all__ = ["build_router"]
