"""Ordering bounded context: Shopping Cart, shipping selection and checkout.

Holds the customer's cart, the delivery address and the shipping quote chosen
for it, and hands the priced cart to the payment gateway at checkout.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
