"""
Dependency Injection Container

A small string-keyed registry of instances and factories.

Design:
- Instances are stored with set(); factories with register()
- Factories receive the container that asked for them and their result is
  cached in that container (lazy singletons)
- scope() creates a child container; a child sees everything its parent
  holds, but a parent factory resolved through a child is built and cached
  in the child. This is how per-request models and services see the
  per-request session and request adapter.

Key conventions:
- Models:   "app.models.<ClassName>"    (see model_key)
- Services: "app.services.<ClassName>"  (see service_key)
- Libraries: short dotted aliases, see the *_KEY constants below
"""

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

MODEL_NAMESPACE = "app.models"
SERVICE_NAMESPACE = "app.services"

# Infrastructure keys
FILESYSTEM_CACHE_KEY = "cache.filesystem"
DISTRIBUTED_CACHE_KEY = "cache.distributed"
CACHE_KEY = "cache.default"
LOGGER_KEY = "logging.logger"
FILESYSTEM_KEY = "storage.filesystem"
REQUEST_KEY = "request"
ROUTER_KEY = "router"
VIEW_KEY = "view.renderer"
SESSION_KEY = "db.session"

Factory = Callable[["Container"], Any]

_MISSING = object()


def model_key(class_name: str) -> str:
    """Container key for a model class name, e.g. 'QuestionModel'."""
    return f"{MODEL_NAMESPACE}.{class_name}"


def service_key(class_name: str) -> str:
    """Container key for a service class name, e.g. 'QuestionService'."""
    return f"{SERVICE_NAMESPACE}.{class_name}"


class Container:
    """
    Registry resolving string keys to shared or lazily constructed instances.

    Usage:
        root = Container()
        root.set(LOGGER_KEY, logging.getLogger("forum"))
        root.register(service_key("QuestionService"), QuestionService)

        request_container = root.scope()
        request_container.set(REQUEST_KEY, QueryRequest(request))
        service = request_container.get(service_key("QuestionService"))
    """

    def __init__(self, parent: Optional["Container"] = None):
        self._parent = parent
        self._instances: dict[str, Any] = {}
        self._factories: dict[str, Factory] = {}

    @property
    def parent(self) -> Optional["Container"]:
        return self._parent

    def set(self, key: str, instance: Any) -> None:
        """Register a ready-made instance under key."""
        self._instances[key] = instance
        self._factories.pop(key, None)

    def register(self, key: str, factory: Factory) -> None:
        """
        Register a factory under key.

        The factory is called with the resolving container on first get()
        and the result is cached in that container.
        """
        self._factories[key] = factory
        self._instances.pop(key, None)

    def has(self, key: str) -> bool:
        container: Optional[Container] = self
        while container is not None:
            if key in container._instances or key in container._factories:
                return True
            container = container._parent
        return False

    def get(self, key: str) -> Any:
        """
        Resolve key to an instance.

        Raises:
            KeyError: If nothing is registered under key in this container
                or any of its parents
        """
        instance = self._instances.get(key, _MISSING)
        if instance is not _MISSING:
            return instance

        container = self
        while container is not None:
            if key in container._factories:
                return self._build(key, container._factories[key])
            instance = container._instances.get(key, _MISSING)
            if instance is not _MISSING:
                return instance
            container = container._parent

        raise KeyError(key)

    def scope(self) -> "Container":
        """Create a child container backed by this one."""
        return Container(parent=self)

    def _build(self, key: str, factory: Factory) -> Any:
        logger.debug(f"Constructing '{key}'")
        instance = factory(self)
        self._instances[key] = instance
        return instance
