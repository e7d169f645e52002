"""
HTTP tests for the department blueprint (``/api/department``).
"""

from orgservices.models.organization import Department, Employee


class TestCreateDepartment:
    def test_post_creates_department(self, client, department_repository):
        response = client.post(
            "/api/department/", json={"organizationId": 1, "name": "IT Department"}
        )

        assert response.status_code == 201
        departments = department_repository.find_all()
        assert len(departments) == 1
        assert departments[0].name == "IT Department"
        assert departments[0].organization_id == 1
        assert departments[0].id is not None

    def test_post_then_list_all(self, client):
        client.post(
            "/api/department/", json={"organizationId": 1, "name": "IT Department"}
        )

        response = client.get("/api/department/")

        assert response.status_code == 200
        body = response.get_json()
        assert len(body) == 1
        assert body[0]["name"] == "IT Department"
        assert body[0]["organizationId"] == 1
        assert body[0]["id"] is not None

    def test_post_missing_name_is_bad_request(self, client, department_repository):
        response = client.post("/api/department/", json={"organizationId": 1})

        assert response.status_code == 400
        assert response.get_json()["errors"] == ["'name' is required."]
        assert department_repository.find_all() == []


class TestReadDepartments:
    def test_get_all(self, client, department_repository):
        department_repository.save(Department(organization_id=1, name="HR Department"))
        department_repository.save(
            Department(organization_id=2, name="Finance Department")
        )

        response = client.get("/api/department/")

        assert response.status_code == 200
        assert {d["name"] for d in response.get_json()} == {
            "HR Department",
            "Finance Department",
        }

    def test_get_by_id(self, client, department_repository):
        saved = department_repository.save(
            Department(organization_id=1, name="Marketing Department")
        )

        response = client.get(f"/api/department/{saved.id}")

        assert response.status_code == 200
        assert response.get_json() == {
            "id": saved.id,
            "organizationId": 1,
            "name": "Marketing Department",
        }

    def test_get_missing_is_404(self, client):
        response = client.get("/api/department/999999")

        assert response.status_code == 404
        assert response.get_json() == {
            "error": "not_found",
            "message": "Department 999999 not found.",
        }

    def test_get_by_organization(self, client, department_repository):
        department_repository.save(Department(organization_id=1, name="IT Department"))
        department_repository.save(Department(organization_id=1, name="HR Department"))
        department_repository.save(
            Department(organization_id=2, name="Sales Department")
        )

        response = client.get("/api/department/organization/1")

        assert response.status_code == 200
        body = response.get_json()
        assert len(body) == 2
        assert all(d["organizationId"] == 1 for d in body)
        assert all("employees" not in d for d in body)

    def test_get_by_unknown_organization_is_empty(self, client):
        response = client.get("/api/department/organization/31337")

        assert response.status_code == 200
        assert response.get_json() == []

    def test_get_by_organization_with_employees(
        self, client, department_repository, employee_repository
    ):
        engineering = department_repository.save(
            Department(organization_id=1, name="Engineering Department")
        )
        department_repository.save(
            Department(organization_id=1, name="Support Department")
        )
        employee_repository.save(
            Employee(
                organization_id=1,
                department_id=engineering.id,
                name="Alice",
                age=25,
                position="Developer",
            )
        )

        response = client.get("/api/department/organization/1/with-employees")

        assert response.status_code == 200
        body = {d["name"]: d for d in response.get_json()}
        assert len(body) == 2
        assert [e["name"] for e in body["Engineering Department"]["employees"]] == [
            "Alice"
        ]
        assert body["Support Department"]["employees"] == []


class TestCreateDepartmentKeepsSubmittedValues:
    def test_post_fractional_organization_id_is_rejected(
        self, client, department_repository
    ):
        response = client.post(
            "/api/department/", json={"organizationId": 1.7, "name": "X"}
        )

        assert response.status_code == 400
        assert response.get_json()["errors"] == [
            "'organizationId' must be an integer."
        ]
        assert department_repository.find_all() == []

    def test_post_non_string_name_is_rejected(self, client, department_repository):
        response = client.post(
            "/api/department/", json={"organizationId": 1, "name": {"a": 1}}
        )

        assert response.status_code == 400
        assert response.get_json()["errors"] == ["'name' must be a string."]
        assert department_repository.find_all() == []
