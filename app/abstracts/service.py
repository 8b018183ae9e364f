"""
Service Base Class

Every forum service extends ServiceAbstract. It provides:
- A locator resolving related models, services and infrastructure
  singletons from the container by name (resolve)
- Companion-model binding: QuestionService is bound to QuestionModel
- Query helpers turning the current request's query string into
  allow-listed order and filter specs for the model layer

Subclasses declare their allow-lists by overriding get_allow_order_fields,
get_allow_filter_fields and get_privacy_fields.
"""

import logging
import math
import re
from abc import ABC
from typing import TYPE_CHECKING, Any, ClassVar, Mapping, Optional

from app.core.container import (
    CACHE_KEY,
    DISTRIBUTED_CACHE_KEY,
    FILESYSTEM_CACHE_KEY,
    FILESYSTEM_KEY,
    LOGGER_KEY,
    REQUEST_KEY,
    ROUTER_KEY,
    VIEW_KEY,
    Container,
    model_key,
    service_key,
)
from app.core.exceptions import DependencyNotFoundError, NotFoundError
from app.core.request import QueryRequest
from app.core.setting import settings
from app.core.validators import filter_keys, parse_order, parse_positive_int

if TYPE_CHECKING:
    from app.abstracts.model import ModelAbstract

# Library aliases a service may resolve by name
LIBRARY_KEYS: dict[str, str] = {
    "filesystem_cache": FILESYSTEM_CACHE_KEY,
    "distributed_cache": DISTRIBUTED_CACHE_KEY,
    "cache": CACHE_KEY,
    "logger": LOGGER_KEY,
    "filesystem": FILESYSTEM_KEY,
    "request": REQUEST_KEY,
    "router": ROUTER_KEY,
    "view": VIEW_KEY,
}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_class_name(name: str) -> str:
    """'question_model' / 'questionModel' -> 'QuestionModel'."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


def to_snake_name(name: str) -> str:
    """'filesystemCache' -> 'filesystem_cache'."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class ServiceAbstract(ABC):
    """
    Base class for all forum services.

    A service is created per request with the request-scoped container and
    binds its companion model on construction, when one is registered.
    Everything else is resolved lazily through resolve().
    """

    # Explicit companion model. When None the model is found by naming
    # convention: XyzService -> XyzModel.
    model_class: ClassVar[Optional[type]] = None

    def __init__(self, container: Container):
        self.container = container
        self.current_model: Optional["ModelAbstract"] = None

        key = self.companion_model_key()
        if key is not None and container.has(key):
            self.current_model = container.get(key)

    @classmethod
    def companion_model_key(cls) -> Optional[str]:
        """Container key of the model this service is bound to."""
        if cls.model_class is not None:
            return model_key(cls.model_class.__name__)
        name = cls.__name__
        if not name.endswith("Service"):
            return None
        return model_key(name[:-len("Service")] + "Model")

    def get_privacy_fields(self) -> list[str]:
        return []

    def get_allow_order_fields(self) -> list[str]:
        return []

    def get_allow_filter_fields(self) -> list[str]:
        return []

    def resolve(self, name: str) -> Any:
        """
        Resolve a model, service or library by short name.

        Lookup order:
        1. Model:   'question_model' -> 'app.models.QuestionModel'
        2. Service: 'answer_service' -> 'app.services.AnswerService'
        3. Library alias, see LIBRARY_KEYS ('logger', 'request', ...)

        Raises:
            DependencyNotFoundError: If none of the candidates is registered
        """
        class_name = to_class_name(name)

        key = model_key(class_name)
        if self.container.has(key):
            return self.container.get(key)

        key = service_key(class_name)
        if self.container.has(key):
            return self.container.get(key)

        # Aliases are lower-case names; 'Logger' is not 'logger'
        key = LIBRARY_KEYS.get(to_snake_name(name)) if name[:1].islower() else None
        if key is not None and self.container.has(key):
            return self.container.get(key)

        raise DependencyNotFoundError(name)

    @property
    def filesystem_cache(self) -> Any:
        return self.resolve("filesystem_cache")

    @property
    def distributed_cache(self) -> Any:
        return self.resolve("distributed_cache")

    @property
    def cache(self) -> Any:
        return self.resolve("cache")

    @property
    def logger(self) -> logging.Logger:
        return self.resolve("logger")

    @property
    def filesystem(self) -> Any:
        return self.resolve("filesystem")

    @property
    def request(self) -> QueryRequest:
        return self.resolve("request")

    @property
    def router(self) -> Any:
        return self.resolve("router")

    @property
    def view(self) -> Any:
        return self.resolve("view")

    def get_order(self, default_order: Optional[Mapping[str, str]] = None) -> dict[str, str]:
        """
        Order spec for a list query.

        order=field  -> {field: "ASC"}
        order=-field -> {field: "DESC"}

        Args:
            default_order: Used when the 'order' parameter is missing, or
                names a field outside get_allow_order_fields()
        """
        result: dict[str, str] = {}
        order = self.request.get_query_param("order")

        if order:
            result = filter_keys(parse_order(order), self.get_allow_order_fields())

        if not result:
            result = dict(default_order or {})

        return result

    def get_where(self, default_filter: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """
        Filter spec for a list query.

        Args:
            default_filter: Base conditions; query parameters with the same
                name override them
        """
        result = filter_keys(self.request.get_query_params(), self.get_allow_filter_fields())
        return {**(default_filter or {}), **result}

    def get_pagination(self) -> tuple[int, int]:
        """(page, per_page) from the query string, clamped to sane bounds."""
        page = parse_positive_int(self.request.get_query_param("page"), 1, settings.MAX_PAGE)
        per_page = parse_positive_int(
            self.request.get_query_param("per_page"), settings.DEFAULT_PER_PAGE
        )
        return page, min(per_page, settings.MAX_PER_PAGE)

    def hide_privacy_fields(self, record: Any) -> dict[str, Any]:
        """Dict copy of a record without the fields listed in get_privacy_fields()."""
        if isinstance(record, Mapping):
            data = dict(record)
        else:
            data = record.model_dump()
        for field in self.get_privacy_fields():
            data.pop(field, None)
        return data

    def _require_model(self) -> "ModelAbstract":
        if self.current_model is None:
            raise DependencyNotFoundError(self.companion_model_key() or type(self).__name__)
        return self.current_model

    async def get(self, record_id: int) -> dict[str, Any]:
        """
        Fetch one record through the companion model.

        Raises:
            NotFoundError: If no record has this id
        """
        model = self._require_model()
        record = await model.get(record_id)
        if record is None:
            raise NotFoundError(model.entity_name(), record_id)
        return self.hide_privacy_fields(record)

    async def get_list(
        self,
        default_filter: Optional[Mapping[str, Any]] = None,
        default_order: Optional[Mapping[str, str]] = None,
    ) -> dict[str, Any]:
        """
        One page of records matching the request's filter and order.

        Returns:
            Dictionary with items, total, page, per_page and pages
        """
        model = self._require_model()
        where = self.get_where(default_filter)
        order = self.get_order(default_order)
        page, per_page = self.get_pagination()

        self.logger.debug(
            f"{type(self).__name__}.get_list where={where} order={order} "
            f"page={page} per_page={per_page}"
        )

        total = await model.count(where)
        records = await model.select(where, order, limit=per_page, offset=(page - 1) * per_page)

        return {
            "items": [self.hide_privacy_fields(record) for record in records],
            "total": total,
            "page": page,
            "per_page": per_page,
            "pages": math.ceil(total / per_page) if total else 0,
        }
