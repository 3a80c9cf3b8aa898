"""Tests for Flask error handlers and the end-to-end query flow."""

from flask import Flask
from flask.testing import FlaskClient

from query_params.config import Settings
from query_params.exceptions import MissingParameterException
from query_params.schemas import ArrayResolveOptions
from query_params.utils.flask_error_handlers import register_error_handlers


class TestQueryEndpoints:
    """Requests flowing through QueryArgs and the registered handlers."""

    def test_resolves_query_parameters(self, client: FlaskClient):
        response = client.get("/search?q=lamp&tags=red,green&tags=blue&include_done=true&include_done=false")

        assert response.status_code == 200
        assert response.get_json() == {
            "q": "lamp",
            "sort": None,
            "tags": ["red", "green", "blue"],
            "include_done": True,
        }

    def test_boolean_is_strict(self, client: FlaskClient):
        response = client.get("/search?q=lamp&include_done=1")

        assert response.get_json()["include_done"] is False

    def test_missing_required_parameter(self, client: FlaskClient):
        response = client.get("/search?sort=name")

        assert response.status_code == 400
        data = response.get_json()
        assert data["error"] == "Missing required query parameter"
        assert data["details"]["code"] == "MISSING_PARAMETER"
        assert data["details"]["parameter"] == "q"

    def test_empty_required_parameter(self, client: FlaskClient):
        response = client.get("/items?id=")

        assert response.status_code == 400
        assert response.get_json()["error"] == "An item id is required"


def test_configured_status_code():
    app = Flask(__name__)
    register_error_handlers(app, Settings(QUERY_ERROR_STATUS_CODE=422))

    @app.route("/raise")
    def raise_missing():
        raise MissingParameterException()

    response = app.test_client().get("/raise")

    assert response.status_code == 422
    data = response.get_json()
    assert data["error"] == "Missing required query parameter"
    assert "parameter" not in data["details"]


def test_validation_error_handler(test_settings: Settings):
    app = Flask(__name__)
    register_error_handlers(app, test_settings)

    @app.route("/invalid")
    def invalid_options():
        ArrayResolveOptions(delimiter=3)
        return "unreachable"

    response = app.test_client().get("/invalid")

    assert response.status_code == 400
    data = response.get_json()
    assert data["error"] == "Validation failed"
    assert data["details"][0].startswith("delimiter")
