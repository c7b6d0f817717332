"""HTTP routes of the scheduling API."""

from http import HTTPStatus

from flask import Blueprint, Flask, jsonify


def _users_blueprint() -> Blueprint:
    users = Blueprint("users", __name__, url_prefix="/users")

    @users.get("")
    def list_users():
        return jsonify(status="ok"), HTTPStatus.ACCEPTED

    return users


def create_app():
    """Build the Flask application with all routes registered."""
    app = Flask(__name__)

    @app.get("/ping")
    def ping():
        return jsonify(message="hehehe funcionou")

    api = Blueprint("api_v1", __name__, url_prefix="/api/v1")
    api.register_blueprint(_users_blueprint())
    app.register_blueprint(api)
    return app