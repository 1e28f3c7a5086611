"""Unit tests for FastAPI service dependencies."""

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from service_objects.infrastructure.di.container import get_container
from service_objects.presentation.dependencies.services import ServiceDep, service_dependency


class Greeter:
    def __init__(self, greeting: str = "Hello") -> None:
        self.greeting = greeting

    def greet(self, name: str) -> str:
        return f"{self.greeting}, {name}"


# Resolved from the process-wide manager at request time
GreeterServiceDep = ServiceDep("greeter")


def test_dependency_resolves_from_process_wide_container():
    get_container().register_instance("greeter", Greeter("Hi"))
    app = FastAPI()

    @app.get("/greet/{name}")
    def greet(name: str, greeter=Depends(service_dependency("greeter"))):
        return {"message": greeter.greet(name)}

    client = TestClient(app)
    response = client.get("/greet/Ada")

    assert response.status_code == 200
    assert response.json() == {"message": "Hi, Ada"}


def test_dependency_resolves_from_explicit_manager(manager):
    manager.configure([{"greeter": {"greeting": "Welcome"}}])
    manager.register_singleton("greeter", Greeter, config_key="greeter")
    app = FastAPI()

    @app.get("/greet/{name}")
    def greet(name: str, greeter: ServiceDep("greeter", manager.locator)):
        return {"message": greeter.greet(name)}

    client = TestClient(app)

    assert client.get("/greet/Bob").json() == {"message": "Welcome, Bob"}
    assert client.get("/greet/Eve").json() == {"message": "Welcome, Eve"}
    assert manager.is_instantiated("greeter")


def test_dependency_function_is_named_after_service():
    assert service_dependency("billing.invoices").__name__ == "get_billing_invoices_service"


def test_module_level_alias_resolves_at_request_time():
    app = FastAPI()

    @app.get("/greet/{name}")
    def greet(name: str, greeter: GreeterServiceDep):
        return {"message": greeter.greet(name)}

    get_container().register_instance("greeter", Greeter("Hey"))
    client = TestClient(app)

    assert client.get("/greet/Ada").json() == {"message": "Hey, Ada"}
