"""
Basic application tests.

Validates that the FastAPI app is composed with the error handlers.
"""

from fastapi.testclient import TestClient

from svcerr.domain.errors import Error, HTTPErr, Kind, new_error
from svcerr.main import app, create_app


class TestCreateApp:
    """Tests for the composition root."""

    def test_error_handlers_registered(self) -> None:
        """Every error type is routed to the translator."""
        assert Error in app.exception_handlers
        assert HTTPErr in app.exception_handlers
        assert Exception in app.exception_handlers

    def test_route_error_translated(self) -> None:
        """Errors raised in routes of a fresh app get the JSON error body."""
        fresh = create_app()

        @fresh.get("/items/{item_id}")
        def get_item(item_id: str) -> None:
            raise new_error(Kind.NotExist, "item_not_found", LookupError(f"item {item_id}"))

        response = TestClient(fresh).get("/items/7")
        assert response.status_code == 400
        assert response.json() == {
            "error": {"kind": "NotExist", "code": "item_not_found", "message": "item 7"}
        }
