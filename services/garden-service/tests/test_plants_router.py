"""
Tests for the HTTP API.

Covers:
- CRUD endpoints over the test database
- Error kind to status code mapping
- Health, readiness and metrics endpoints
"""

from unittest.mock import patch

from app.domain.exceptions import RepositoryException

PLANTS_URL = "/api/v1/plants"


def add_plant(client, payload):
    response = client.post(PLANTS_URL, json=payload)
    assert response.status_code == 201
    return response.json()


class TestPlantEndpoints:
    """Test plant CRUD endpoints."""

    def test_add_plant(self, client, cucumber_payload):
        """Test POST stores a plant and returns it with an id."""
        response = client.post(PLANTS_URL, json=cucumber_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["catalog_number"] == "1234ABCD9876"
        assert data["is_edible"] is True

    def test_add_invalid_plant(self, client, cucumber_payload):
        """Test an invalid plant maps to 422 with field errors."""
        cucumber_payload["catalog_number"] = "ABCD9876"

        response = client.post(PLANTS_URL, json=cucumber_payload)

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "validation"
        assert body["message"] == "Invalid plant!"
        assert "catalog_number" in body["details"]["errors"]

    def test_add_duplicate_plant(self, client, cucumber_payload):
        """Test a reused catalog number maps to 409."""
        add_plant(client, cucumber_payload)

        response = client.post(PLANTS_URL, json=cucumber_payload)

        assert response.status_code == 409
        assert response.json()["error"] == "conflict"

    def test_add_plant_with_boolean_quantity(self, client, cucumber_payload):
        """Test JSON booleans are not accepted as a quantity."""
        cucumber_payload["quantity"] = True
        cucumber_payload["is_edible"] = "yes"

        response = client.post(PLANTS_URL, json=cucumber_payload)

        assert response.status_code == 422
        errors = response.json()["details"]["errors"]
        assert "quantity" in errors
        assert "is_edible" in errors
        assert client.get(PLANTS_URL).status_code == 404

    def test_add_plant_with_malformed_body(self, client, cucumber_payload):
        """Test body type errors use the catalog error shape."""
        cucumber_payload["quantity"] = "abc"

        response = client.post(PLANTS_URL, json=cucumber_payload)

        assert response.status_code == 422
        body = response.json()
        assert "detail" not in body
        assert body["error"] == "validation"
        assert body["message"] == "Invalid plant!"
        assert list(body["details"]["errors"]) == ["quantity"]

    def test_update_plant_with_malformed_body(self, client, cucumber_payload):
        """Test update body type errors use the catalog error shape."""
        add_plant(client, cucumber_payload)
        cucumber_payload["is_edible"] = "no"

        response = client.put(f"{PLANTS_URL}/1234ABCD9876", json=cucumber_payload)

        assert response.status_code == 422
        assert response.json()["message"] == "Invalid plant!"
        assert "is_edible" in response.json()["details"]["errors"]

    def test_list_plants(self, client, cucumber_payload):
        """Test GET lists stored plants."""
        add_plant(client, cucumber_payload)

        response = client.get(PLANTS_URL)

        assert response.status_code == 200
        assert [plant["name"] for plant in response.json()] == ["Cucumber"]

    def test_list_plants_empty(self, client):
        """Test an empty catalog maps to 404."""
        response = client.get(PLANTS_URL)

        assert response.status_code == 404
        assert response.json()["message"] == "No plant found."

    def test_search_by_food_type(self, client, cucumber_payload):
        """Test food type search returns matching plants."""
        add_plant(client, cucumber_payload)

        response = client.get(f"{PLANTS_URL}/search", params={"food_type": "Vegetable"})

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_search_blank_food_type(self, client):
        """Test a blank food type maps to 400."""
        response = client.get(f"{PLANTS_URL}/search", params={"food_type": "  "})

        assert response.status_code == 400
        assert response.json()["message"] == "Food type cannot be empty."

    def test_search_without_food_type(self, client):
        """Test a missing food type is treated as blank."""
        response = client.get(f"{PLANTS_URL}/search")

        assert response.status_code == 400
        assert response.json()["error"] == "argument"

    def test_get_plant(self, client, cucumber_payload):
        """Test GET by catalog number."""
        add_plant(client, cucumber_payload)

        response = client.get(f"{PLANTS_URL}/1234ABCD9876")

        assert response.status_code == 200
        assert response.json()["name"] == "Cucumber"

    def test_get_unknown_plant(self, client):
        """Test an unknown catalog number maps to 404."""
        response = client.get(f"{PLANTS_URL}/randomNumber")

        assert response.status_code == 404
        assert response.json()["message"] == "No plant found with catalog number: randomNumber"

    def test_update_plant(self, client, cucumber_payload):
        """Test PUT replaces the plant's fields."""
        add_plant(client, cucumber_payload)
        update = {k: v for k, v in cucumber_payload.items() if k != "catalog_number"}
        update["name"] = "Potato"

        response = client.put(f"{PLANTS_URL}/1234ABCD9876", json=update)

        assert response.status_code == 200
        assert response.json()["name"] == "Potato"
        assert response.json()["id"] == 1

    def test_update_invalid_plant(self, client, cucumber_payload):
        """Test PUT with an empty body maps to 422."""
        add_plant(client, cucumber_payload)

        response = client.put(f"{PLANTS_URL}/1234ABCD9876", json={})

        assert response.status_code == 422
        assert response.json()["message"] == "Invalid plant!"

    def test_update_unknown_plant(self, client, cucumber_payload):
        """Test PUT on a missing plant maps to 404."""
        update = {k: v for k, v in cucumber_payload.items() if k != "catalog_number"}

        response = client.put(f"{PLANTS_URL}/1234ABCD9876", json=update)

        assert response.status_code == 404

    def test_delete_plant(self, client, cucumber_payload):
        """Test DELETE removes the plant."""
        add_plant(client, cucumber_payload)

        response = client.delete(f"{PLANTS_URL}/1234ABCD9876")

        assert response.status_code == 204
        assert client.get(f"{PLANTS_URL}/1234ABCD9876").status_code == 404

    def test_delete_unknown_plant(self, client):
        """Test DELETE of a missing plant maps to 404."""
        response = client.delete(f"{PLANTS_URL}/1234ABCD9876")

        assert response.status_code == 404

    def test_request_id_echoed(self, client):
        """Test the request ID header is returned."""
        response = client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"


class TestServiceEndpoints:
    """Test health, readiness and metrics endpoints."""

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["service"] == "garden-service"

    def test_ready(self, client):
        response = client.get("/api/v1/ready")

        assert response.status_code == 200
        assert response.json()["ready"] is True
        assert response.json()["checks"]["database"] == "healthy"

    def test_not_ready_when_database_down(self, client):
        with patch("app.routers.health_router.check_database", return_value=False):
            response = client.get("/api/v1/ready")

        assert response.status_code == 503
        assert response.json()["ready"] is False
        assert "plants" not in response.json()["checks"]

    def test_ready_reports_plant_count(self, client, cucumber_payload):
        assert client.get("/api/v1/ready").json()["checks"]["plants"] == 0

        add_plant(client, cucumber_payload)

        assert client.get("/api/v1/ready").json()["checks"]["plants"] == 1

    def test_not_ready_when_count_fails(self, client):
        with patch(
            "app.routers.health_router.SqlAlchemyPlantRepository.count",
            side_effect=RepositoryException("count", "database is locked"),
        ):
            response = client.get("/api/v1/ready")

        assert response.status_code == 503
        assert response.json()["checks"]["plants"] == "unavailable"

    def test_metrics(self, client, cucumber_payload):
        add_plant(client, cucumber_payload)

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "garden_plant_operations_total" in response.text
        assert "garden_http_requests_total" in response.text

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["health"] == "/api/v1/health"
