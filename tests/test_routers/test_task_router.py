import unittest
from datetime import datetime
from types import SimpleNamespace as Obj
from unittest.mock import patch

from fastapi.testclient import TestClient

from main import app
from core.context import get_context
from core.exceptions import NotFoundError


def _task(**kw):
    base = dict(id=1, project_id=1, employee_id=2, title="Login page", status="Open", end_date=datetime(2025, 4, 1))
    base.update(kw)
    return Obj(**base)


class TaskRouterTests(unittest.TestCase):
    def setUp(self):
        def _fake_ctx():
            yield Obj()

        app.dependency_overrides[get_context] = _fake_ctx
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.pop(get_context, None)

    @patch("task.router.service.get_tasks")
    def test_list_tasks_with_filters(self, mock_get):
        mock_get.return_value = [_task()]
        resp = self.client.get("/api/tasks?employee_id=2&status=Open")
        self.assertEqual(resp.status_code, 200, resp.text)
        _, kwargs = mock_get.call_args
        self.assertEqual(kwargs, {"project_id": None, "employee_id": 2, "status": "Open"})

    @patch("task.router.service.get_task")
    def test_get_task_404(self, mock_get):
        mock_get.return_value = None
        self.assertEqual(self.client.get("/api/tasks/5").status_code, 404)

    @patch("task.router.service.create_task")
    def test_create_task_missing_project_404(self, mock_create):
        mock_create.side_effect = NotFoundError("Project", 1)
        resp = self.client.post("/api/tasks", json={
            "project_id": 1, "employee_id": 2, "status": "Open", "end_date": "2025-04-01T00:00:00",
        })
        self.assertEqual(resp.status_code, 404)

    @patch("task.router.service.update_task")
    def test_update_task(self, mock_update):
        mock_update.return_value = _task(status="Completed")
        resp = self.client.put("/api/tasks/1", json={"status": "Completed", "end_date": "2025-04-01T00:00:00"})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["status"], "Completed")

    @patch("task.router.service.delete_task")
    def test_delete_task(self, mock_delete):
        mock_delete.return_value = True
        self.assertEqual(self.client.delete("/api/tasks/1").json(), {"message": "task deleted"})

    def test_openapi_documents_every_router_tag(self):
        declared = [t["name"] for t in app.openapi()["tags"]]
        self.assertEqual(declared, ["Employees", "Projects", "Tasks", "Assignments", "Health Checks"])
        used = {
            tag
            for path in app.openapi()["paths"].values()
            for op in path.values()
            for tag in op.get("tags", [])
        }
        self.assertLessEqual(used, set(declared))
