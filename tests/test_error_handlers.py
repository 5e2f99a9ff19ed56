"""
Tests for the FastAPI error handlers.

Routes raise errors; the registered handlers must answer every one of
them through the HTTP translator.
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from svcerr.domain.errors import Code, Kind, Parameter, new_error, response_error
from svcerr.shared.errors.handlers import register_error_handlers

app = FastAPI()
register_error_handlers(app)


@app.get("/validation")
def raise_validation() -> None:
    raise new_error(
        Kind.Validation,
        Code("invalid_email"),
        Parameter("email"),
        ValueError("email is malformed"),
    )


@app.get("/not-found")
def raise_not_found() -> None:
    lookup = new_error(Kind.NotExist, Parameter("id"), LookupError("user 7 missing"))
    raise response_error(404, lookup)


@app.get("/unauthenticated")
def raise_unauthenticated() -> None:
    raise new_error(Kind.Unauthenticated, ValueError("token expired"))


@app.get("/forbidden")
def raise_forbidden() -> None:
    raise response_error(403)


@app.get("/crash")
def raise_unexpected() -> None:
    raise RuntimeError("connection pool exhausted")


client = TestClient(app, raise_server_exceptions=False)


class TestErrorHandlers:
    """Tests for errors raised inside routes."""

    def test_error_mapped_by_kind(self) -> None:
        response = client.get("/validation")
        assert response.status_code == 400
        assert response.headers["content-type"] == "application/json"
        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.json() == {
            "error": {
                "kind": "Validation",
                "code": "invalid_email",
                "param": "email",
                "message": "email is malformed",
            }
        }

    def test_http_err_uses_explicit_status(self) -> None:
        response = client.get("/not-found")
        assert response.status_code == 404
        assert response.json() == {
            "error": {
                "kind": "NotExist",
                "param": "id",
                "message": "user 7 missing",
            }
        }

    def test_auth_failure_has_no_body(self) -> None:
        response = client.get("/unauthenticated")
        assert response.status_code == 401
        assert response.content == b""
        assert response.headers["x-content-type-options"] == "nosniff"

    def test_status_only(self) -> None:
        response = client.get("/forbidden")
        assert response.status_code == 403
        assert response.content == b""

    def test_unexpected_error_is_generic_500(self) -> None:
        response = client.get("/crash")
        assert response.status_code == 500
        assert response.json() == {
            "error": {
                "kind": "Unanticipated",
                "code": "Unanticipated",
                "message": "Unexpected error - contact support",
            }
        }
