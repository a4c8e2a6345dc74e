"""Tests for the mapping of domain errors onto HTTP responses."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from src.selectshop.api.http.errors import STATUS_BY_KIND, register_exception_handlers
from src.selectshop.core.exceptions import (
    ErrorKind,
    InvalidArgumentError,
    NotFoundError,
    StorageFailureError,
    UnauthenticatedError,
)


class Payload(BaseModel):
    count: int


@pytest.fixture
def error_client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)
    errors = {
        "invalid": InvalidArgumentError("bad input"),
        "unauthenticated": UnauthenticatedError("who are you"),
        "missing": NotFoundError("no such folder"),
        "storage": StorageFailureError("disk on fire"),
    }

    @app.get("/raise/{name}")
    def raise_error(name: str):
        raise errors[name]

    @app.post("/payload")
    def payload(body: Payload):
        return body

    return TestClient(app)


def test_every_kind_has_a_status():
    assert set(STATUS_BY_KIND) == set(ErrorKind)


@pytest.mark.parametrize(
    ("name", "status_code", "message"),
    [
        ("invalid", 400, "bad input"),
        ("unauthenticated", 401, "who are you"),
        ("missing", 404, "no such folder"),
    ],
)
def test_client_errors_keep_message(error_client: TestClient, name, status_code, message):
    response = error_client.get(f"/raise/{name}")

    assert response.status_code == status_code
    assert response.json() == {"message": message, "statusCode": status_code}


def test_storage_failure_hides_details(error_client: TestClient):
    response = error_client.get("/raise/storage")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error", "statusCode": 500}


def test_unauthenticated_sets_challenge(error_client: TestClient):
    response = error_client.get("/raise/unauthenticated")

    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_schema_violation_is_bad_request(error_client: TestClient):
    response = error_client.post("/payload", json={"count": "many"})

    assert response.status_code == 400
    assert response.json()["statusCode"] == 400
    assert response.json()["message"].startswith("body.count")


def test_unknown_route_uses_error_body(error_client: TestClient):
    response = error_client.get("/nowhere")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found", "statusCode": 404}


def test_error_carries_kind():
    error = NotFoundError("gone")

    assert error.kind is ErrorKind.NOT_FOUND
    assert error.message == "gone"
    assert str(error) == "gone"
