import pytest
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from backend.main import app
from backend.routes import router as task_router
from backend.domains.tasks.exceptions import TaskNotFoundException
from backend.domains.tasks.routes import get_task_service
from backend.domains.tasks.schemas import Task, TaskCreate, TaskUpdate


class RecordingTaskService:
    """Stands in for TaskService and records every call it receives."""

    def __init__(self):
        self.calls = []

    def list_tasks(self):
        self.calls.append(("list_tasks",))
        return [Task(id="t-1", name="n", description="d")]

    def count_tasks(self):
        self.calls.append(("count_tasks",))
        return 15

    def create_task(self, task_data):
        self.calls.append(("create_task", task_data))
        if task_data.name == "boom":
            raise RuntimeError("disk full")
        return Task(id="generated", **task_data.model_dump())

    def get_task(self, task_id):
        self.calls.append(("get_task", task_id))
        return self._lookup(task_id)

    def delete_task(self, task_id):
        self.calls.append(("delete_task", task_id))
        return self._lookup(task_id)

    def update_task(self, task_id, task_data):
        self.calls.append(("update_task", task_id, task_data))
        self._lookup(task_id)
        return Task(id=task_id, **task_data.model_dump())

    def _lookup(self, task_id):
        if task_id == "missing":
            raise TaskNotFoundException(task_id)
        return Task(id=task_id, name="n", description="d")


@pytest.fixture
def service():
    recording = RecordingTaskService()
    app.dependency_overrides[get_task_service] = lambda: recording
    try:
        yield recording
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def routed_client(service) -> TestClient:
    return TestClient(app)


BODY = {"name": "x", "description": "y"}


@pytest.mark.parametrize(
    "method, path, body, expected_call",
    [
        ("GET", "/tasks", None, ("list_tasks",)),
        ("GET", "/tasks/count", None, ("count_tasks",)),
        ("POST", "/tasks", BODY, ("create_task", TaskCreate(**BODY))),
        ("GET", "/tasks/abc123", None, ("get_task", "abc123")),
        ("DELETE", "/tasks/abc123", None, ("delete_task", "abc123")),
        ("PUT", "/tasks/abc123", BODY, ("update_task", "abc123", TaskUpdate(**BODY))),
    ],
)
def test_each_route_reaches_exactly_one_handler(routed_client, service, method, path, body, expected_call):
    response = routed_client.request(method, path, json=body)
    assert response.status_code == 200
    assert service.calls == [expected_call]


def test_count_is_not_routed_as_an_id(routed_client, service):
    response = routed_client.get("/tasks/count")
    assert response.status_code == 200
    assert response.json() == 15
    assert [call[0] for call in service.calls] == ["count_tasks"]


@pytest.mark.parametrize("method", ["GET", "DELETE", "PUT"])
def test_not_found_is_mapped_to_msg_body(routed_client, method):
    body = BODY if method == "PUT" else None
    response = routed_client.request(method, "/tasks/missing", json=body)
    assert response.status_code == 404
    assert response.json() == {"msg": "task was not found"}


def test_create_failure_returns_500(routed_client):
    response = routed_client.post("/tasks", json={"name": "boom", "description": "y"})
    assert response.status_code == 500


def test_count_route_registered_before_id_routes():
    paths = [route.path for route in task_router.routes if isinstance(route, APIRoute)]
    count_index = paths.index("/tasks/count")
    id_indexes = [i for i, path in enumerate(paths) if path == "/tasks/{id}"]
    assert len(id_indexes) == 3
    assert count_index < min(id_indexes)


def test_openapi_documents_task_routes():
    schema = TestClient(app).get("/openapi.json").json()
    paths = schema["paths"]

    assert paths["/tasks"]["get"]["summary"] == "Return a tasks list"
    assert paths["/tasks"]["post"]["summary"] == "create a new task"
    assert "500" in paths["/tasks"]["post"]["responses"]
    assert paths["/tasks/count"]["get"]["summary"] == "Get total task count"
    count_content = paths["/tasks/count"]["get"]["responses"]["200"]["content"]
    assert count_content["application/json"]["schema"]["example"] == 15
    for method in ("get", "put", "delete"):
        operation = paths["/tasks/{id}"][method]
        assert operation["tags"] == ["Tasks"]
        assert operation["responses"]["404"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/TaskNotFound"
        }
        assert operation["parameters"][0]["name"] == "id"
        assert operation["parameters"][0]["description"] == "the task id"

    components = schema["components"]["schemas"]
    assert set(components["Task"]["required"]) == {"id", "name", "description"}
    assert {"name": "Tasks", "description": "Tasks endpoints"} in schema["tags"]
