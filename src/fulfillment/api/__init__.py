"""Fulfillment API package."""

from fulfillment.api.routes import shipping_router

__all__ = ["shipping_router"]
