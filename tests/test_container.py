"""Tests for the scoped dependency container."""

import pytest

from app.core.container import (
    MODEL_NAMESPACE,
    SERVICE_NAMESPACE,
    Container,
    model_key,
    service_key,
)


class Counter:
    """Factory that records how often it was called."""

    def __init__(self):
        self.calls = 0

    def __call__(self, container):
        self.calls += 1
        return {"built_by": container, "n": self.calls}


def test_keys_use_namespaces():
    assert model_key("UserModel") == f"{MODEL_NAMESPACE}.UserModel" == "app.models.UserModel"
    assert service_key("UserService") == f"{SERVICE_NAMESPACE}.UserService" == "app.services.UserService"


def test_set_and_get_instance():
    container = Container()
    logger = object()
    container.set("logging.logger", logger)

    assert container.has("logging.logger")
    assert container.get("logging.logger") is logger


def test_missing_key_raises_key_error():
    container = Container()

    assert not container.has("nope")
    with pytest.raises(KeyError):
        container.get("nope")


def test_factory_is_lazy_and_cached():
    container = Container()
    factory = Counter()
    container.register("thing", factory)

    assert factory.calls == 0
    assert container.has("thing")

    first = container.get("thing")
    second = container.get("thing")

    assert first is second
    assert factory.calls == 1
    assert first["built_by"] is container


def test_register_replaces_instance():
    container = Container()
    container.set("thing", "old")
    container.register("thing", lambda c: "new")

    assert container.get("thing") == "new"


def test_set_replaces_factory_for_child_scopes():
    root = Container()
    root.register("thing", lambda c: "from-factory")
    root.set("thing", "from-set")

    assert root.get("thing") == "from-set"
    assert root.scope().get("thing") == "from-set"


def test_child_sees_parent_instances():
    root = Container()
    root.set("router", "the-router")
    child = root.scope()

    assert child.parent is root
    assert child.has("router")
    assert child.get("router") == "the-router"


def test_parent_does_not_see_child_entries():
    root = Container()
    child = root.scope()
    child.set("request", "req")

    assert not root.has("request")


def test_parent_factory_is_built_per_child():
    root = Container()
    factory = Counter()
    root.register("service", factory)

    first_request = root.scope()
    second_request = root.scope()

    a = first_request.get("service")
    b = second_request.get("service")

    assert a is first_request.get("service")
    assert a is not b
    assert a["built_by"] is first_request
    assert b["built_by"] is second_request
    assert factory.calls == 2


def test_parent_factory_sees_child_entries():
    root = Container()
    root.register("model", lambda c: ("model", c.get("db.session")))
    child = root.scope()
    child.set("db.session", "session-1")

    assert child.get("model") == ("model", "session-1")
