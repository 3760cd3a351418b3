"""
Builds the decorated basket controller chain.
"""

import logging
from collections.abc import Sequence

from ..context import BasketContext
from .decorators import DECORATORS
from .iface import BasketControllerIface
from .pipeline import ProductAdditionPipeline
from .standard import StandardBasketController

logger = logging.getLogger(__name__)


def create_basket_controller(
    context: BasketContext,
    decorators: Sequence[str] | None = None,
    pipeline: ProductAdditionPipeline | None = None,
) -> BasketControllerIface:
    """
    Wrap the standard controller in the decorators, innermost first.

    With the default order ["select", "bundle", "stock", "category"] a call
    passes Category, Stock, Bundle and Select before it reaches the
    standard controller.

    Raises:
        ValueError: If a decorator name is unknown
    """
    names = list(context.settings.BASKET_DECORATORS if decorators is None else decorators)
    pipeline = pipeline or ProductAdditionPipeline(context)

    controller: BasketControllerIface = StandardBasketController(context, pipeline)

    for name in names:
        if name not in DECORATORS:
            raise ValueError(f"Unknown basket decorator: {name}")
        controller = DECORATORS[name](controller, context, pipeline)

    logger.debug(f"Basket controller created with decorators {names}")
    return controller.set_object(controller)
