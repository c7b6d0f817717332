import pytest

from agendamento.routes import create_app


@pytest.fixture
def client():
    return create_app().test_client()


def test_ping(client):
    response = client.get("/ping")
    assert response.status_code == 200
    assert response.get_json() == {"message": "hehehe funcionou"}


def test_users_listing(client):
    response = client.get("/api/v1/users")
    assert response.status_code == 202
    assert response.get_json() == {"status": "ok"}


def test_users_post_not_allowed(client):
    assert client.post("/api/v1/users").status_code == 405


def test_unknown_route(client):
    assert client.get("/api/v2/users").status_code == 404