from types import SimpleNamespace

import pytest
from flask import Flask, abort

from admin_proxy.api.errors import register_error_handlers


@pytest.fixture()
def flask_client():
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.logger = SimpleNamespace(error=lambda *args, **kwargs: None)

    register_error_handlers(app)

    @app.route("/crash")
    def crash():
        raise RuntimeError("database password is hunter2")

    @app.route("/teapot")
    def teapot():
        abort(418)

    @app.route("/post-only", methods=["POST"])
    def post_only():
        return "ok"

    with app.test_client() as client:
        yield client


def test_unknown_route_returns_json_404(flask_client):
    response = flask_client.get("/missing")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Not Found"}


def test_wrong_method_returns_json_405(flask_client):
    response = flask_client.get("/post-only")
    assert response.status_code == 405
    assert response.get_json() == {"error": "Method Not Allowed"}


def test_other_http_errors_keep_their_status(flask_client):
    response = flask_client.get("/teapot")
    assert response.status_code == 418
    assert response.get_json() == {"error": "I'm a teapot"}


def test_uncaught_exception_hides_details(flask_client):
    response = flask_client.get("/crash")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal Server Error"}
    assert "hunter2" not in response.get_data(as_text=True)
