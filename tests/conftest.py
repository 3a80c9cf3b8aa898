"""Pytest configuration and fixtures."""

import pytest
from flask import Flask, jsonify
from flask.testing import FlaskClient

from query_params.config import Settings, get_settings
from query_params.utils.flask_error_handlers import register_error_handlers
from query_params.utils.request_parsing import QueryArgs


def _build_test_settings() -> Settings:
    """Construct base Settings object for tests."""
    return Settings(
        FLASK_ENV="testing",
        QUERY_ARRAY_DELIMITER=",",
        QUERY_MISSING_PARAMETER_MESSAGE="Missing required query parameter",
        QUERY_ERROR_STATUS_CODE=400,
    )


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return _build_test_settings()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make sure cached settings never leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app(test_settings: Settings) -> Flask:
    """Minimal Flask application exercising the query helpers."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    register_error_handlers(app, test_settings)

    @app.route("/search")
    def search():
        query = QueryArgs(settings=test_settings)
        return jsonify({
            "q": query.required_string("q"),
            "sort": query.string("sort"),
            "tags": query.array("tags", flat=True),
            "include_done": query.boolean("include_done"),
        })

    @app.route("/items")
    def items():
        query = QueryArgs(settings=test_settings)
        return jsonify({
            "id": query.required_string("id", message="An item id is required"),
        })

    return app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create test client."""
    return app.test_client()
