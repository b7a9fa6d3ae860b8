import pytest
from fastapi.testclient import TestClient

from todolist_service.infrastructure.entrypoints.api.app_factory import create_app

EXPECTED_TASKS_BODY = (
    b'{"task":["Watch Go crash course","Watch Nana\'s Golang Full Course",'
    b'"Reward myself with a donut"]}'
)


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))


def test_root_returns_greeting(client):
    for _ in range(3):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"message": "Hello user. Welcome to our Todolist App!"}


def test_show_tasks_returns_fixed_list(client):
    first = client.get("/show-tasks")
    second = client.get("/show-tasks")

    assert first.status_code == 200
    assert first.json()["task"] == [
        "Watch Go crash course",
        "Watch Nana's Golang Full Course",
        "Reward myself with a donut",
    ]
    assert first.content == EXPECTED_TASKS_BODY
    assert second.content == first.content


def test_unknown_route_is_not_found(client):
    assert client.get("/unknown").status_code == 404


def test_docs_routes_are_not_exposed(client):
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


@pytest.mark.parametrize(
    "method, path",
    [("post", "/show-tasks"), ("put", "/"), ("delete", "/show-tasks"), ("head", "/")],
)
def test_wrong_method_on_defined_route_is_not_found(client, method, path):
    response = client.request(method.upper(), path)

    assert response.status_code == 404
    assert "allow" not in response.headers


def test_wrong_method_body_matches_unknown_route(client):
    assert client.post("/show-tasks").json() == client.get("/unknown").json()


def test_injected_catalog_is_served(settings, custom_catalog):
    client = TestClient(create_app(settings, task_catalog=custom_catalog))

    assert client.get("/show-tasks").json() == {"task": ["Write tests", "Ship it"]}


def test_correlation_id_is_echoed(client):
    response = client.get("/", headers={"X-Correlation-ID": "req-42"})

    assert response.headers["x-correlation-id"] == "req-42"


def test_correlation_id_is_generated_when_missing(client):
    assert client.get("/").headers["x-correlation-id"]


def test_unexpected_error_returns_json_500(settings):
    app = create_app(settings)

    def explode():
        raise RuntimeError("boom")

    app.add_api_route("/explode", explode)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/explode")

    assert response.status_code == 500
    assert response.json() == {"status": "error", "message": "Internal processing error."}


def test_module_level_app_serves_routes():
    from todolist_service.main import app

    response = TestClient(app).get("/")

    assert response.status_code == 200
