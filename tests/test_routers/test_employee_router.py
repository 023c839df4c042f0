import unittest
from decimal import Decimal
from types import SimpleNamespace as Obj
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from main import app
from core.context import get_context
from core.exceptions import NotFoundError, StorageError, ValidationError


def _employee(**kw):
    base = dict(id=1, first_name="Ali", last_name="Veli", completed_task_count=None,
                overdue_task_count=None, project_links=[])
    base.update(kw)
    return Obj(**base)


class EmployeeRouterTests(unittest.TestCase):
    def setUp(self):
        def _fake_ctx():
            yield Obj()

        app.dependency_overrides[get_context] = _fake_ctx
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.pop(get_context, None)

    # --- LIST ---

    @patch("employee.router.service.get_employees")
    def test_list_employees(self, mock_get):
        mock_get.return_value = [_employee(project_links=[Obj(project_id=3, employee_id=1)])]
        resp = self.client.get("/api/employees")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), [{
            "id": 1, "first_name": "Ali", "last_name": "Veli",
            "completed_task_count": None, "overdue_task_count": None,
            "project_links": [{"project_id": 3, "employee_id": 1}],
        }])

    @patch("employee.router.service.get_employees")
    def test_list_employees_storage_error_500(self, mock_get):
        mock_get.side_effect = StorageError("Error retrieving employees", cause=OperationalError("s", {}, Exception("x")))
        resp = self.client.get("/api/employees")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json()["error"], "storage_error")
        self.assertEqual(resp.json()["message"], "Error retrieving employees")

    # --- GET /{id} ---

    @patch("employee.router.service.get_employee")
    def test_get_employee_200(self, mock_get):
        mock_get.return_value = _employee()
        resp = self.client.get("/api/employees/1")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["first_name"], "Ali")

    @patch("employee.router.service.get_employee")
    def test_get_employee_404(self, mock_get):
        mock_get.return_value = None
        resp = self.client.get("/api/employees/999")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "employee not found")

    # --- CREATE ---

    @patch("employee.router.service.create_employee")
    def test_create_employee_201(self, mock_create):
        mock_create.return_value = _employee(id=10, first_name="John", last_name="Doe")
        resp = self.client.post("/api/employees", json={"first_name": "John", "last_name": "Doe"})
        self.assertEqual(resp.status_code, 201, resp.text)
        self.assertEqual(resp.json()["id"], 10)

    @patch("employee.router.service.create_employee")
    def test_create_employee_blank_name_422(self, mock_create):
        mock_create.side_effect = ValidationError("Employee first name is required", field="first_name")
        resp = self.client.post("/api/employees", json={"first_name": " ", "last_name": "Doe"})
        self.assertEqual(resp.status_code, 422)
        body = resp.json()
        self.assertEqual(body["error"], "validation_error")
        self.assertEqual(body["details"][0]["loc"], ["body", "first_name"])

    def test_create_employee_422_on_unknown_field(self):
        resp = self.client.post("/api/employees", json={"first_name": "A", "last_name": "B", "id": 5})
        self.assertEqual(resp.status_code, 422)

    # --- PUT /{id} ---

    @patch("employee.router.service.update_employee")
    def test_update_employee_200(self, mock_update):
        mock_update.return_value = _employee(first_name="Ahmet", completed_task_count=3)
        resp = self.client.put("/api/employees/1", json={"first_name": "Ahmet", "last_name": "Veli", "completed_task_count": 3})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["completed_task_count"], 3)

    @patch("employee.router.service.update_employee")
    def test_update_employee_404(self, mock_update):
        mock_update.side_effect = NotFoundError("Employee", 999)
        resp = self.client.put("/api/employees/999", json={"first_name": "X", "last_name": "Y"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["message"], "Employee with ID 999 not found")

    # --- DELETE /{id} ---

    @patch("employee.router.service.delete_employee")
    def test_delete_employee_200(self, mock_delete):
        mock_delete.return_value = True
        resp = self.client.delete("/api/employees/1")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), {"message": "employee deleted"})

    @patch("employee.router.service.delete_employee")
    def test_delete_employee_404_when_service_false(self, mock_delete):
        mock_delete.return_value = False
        resp = self.client.delete("/api/employees/1")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "employee not found")

    # --- STATS ---

    @patch("employee.router.service.get_performance_score")
    @patch("employee.router.service.get_overdue_task_count")
    @patch("employee.router.service.get_completed_task_count")
    def test_employee_stats(self, mock_completed, mock_overdue, mock_score):
        mock_completed.return_value = 5
        mock_overdue.return_value = 2
        mock_score.return_value = Decimal(5) / Decimal(7) * 100
        resp = self.client.get("/api/employees/1/stats")
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["completed_task_count"], 5)
        self.assertEqual(body["overdue_task_count"], 2)
        self.assertAlmostEqual(body["performance_score"], 71.43, places=2)
