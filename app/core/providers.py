"""
Container Providers

Builds the application-wide root container. Request-specific entries (the
query string adapter and the database session) are added to a child
container per request, see app.api.deps.get_container.
"""

import logging
from typing import Any, Optional

from app.core.container import LOGGER_KEY, ROUTER_KEY, Container
from app.models import register_models
from app.services import register_services

logger = logging.getLogger(__name__)

APP_LOGGER_NAME = "forum"


def build_container(router: Optional[Any] = None) -> Container:
    """
    Create the root container with every model, service and shared library.

    Args:
        router: The application's router, exposed to services as 'router'
    """
    container = Container()
    container.set(LOGGER_KEY, logging.getLogger(APP_LOGGER_NAME))
    if router is not None:
        container.set(ROUTER_KEY, router)

    register_models(container)
    register_services(container)

    logger.info("Root container built")
    return container
