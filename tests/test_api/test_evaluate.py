"""API tests for the evaluate, operators and health endpoints."""

import pytest
from fastapi.testclient import TestClient
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from api.main import app
from prefixeval.runtime.tokenizer import MAX_DEPTH_LIMIT


def nested(depth):
    return "(add " * depth + "1" + ")" * depth


class TestEvaluateAPI:
    """Tests for the evaluate API endpoint."""

    @pytest.fixture
    def client(self):
        """Test client."""
        return TestClient(app)

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "prefixeval API"

    def test_health_check(self, client):
        """Test health endpoint."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness_check(self, client):
        response = client.get("/health/ready")
        assert response.status_code == 200
        data = response.json()
        assert data["ready"] is True
        assert data["checks"]["operators"] == 2

    def test_evaluate_missing_expression(self, client):
        """Test request validation."""
        response = client.post("/api/v1/evaluate", json={})
        assert response.status_code == 422

    @pytest.mark.parametrize("expression,expected", [
        ("(add 1 1)", "2"),
        ("(multiply 1 2 3 4 5)", "120"),
        ("(add 1 (multiply 2 3))", "7"),
        ("42", "42"),
    ])
    def test_evaluate_success(self, client, expression, expected):
        response = client.post("/api/v1/evaluate", json={"expression": expression})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["result"] == expected
        assert data["error"] is None
        assert "execution_time_ms" in data

    def test_evaluate_syntax_error(self, client):
        """Test evaluation errors are reported in the body."""
        response = client.post("/api/v1/evaluate", json={"expression": "(add 1 1"})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["result"] is None
        assert data["error_kind"] == "syntax_error"
        assert data["error"] == "There is a syntax error in the given expression."

    def test_evaluate_unregistered_handler(self, client):
        response = client.post("/api/v1/evaluate", json={"expression": "(add 1 (subtract 5 1))"})
        data = response.json()
        assert data["error_kind"] == "handler_not_registered"

    def test_evaluate_with_options(self, client):
        response = client.post(
            "/api/v1/evaluate",
            json={"expression": "(add 1 (add 1 1))", "options": {"max_depth": 1}},
        )
        assert response.status_code == 200
        assert response.json()["error_kind"] == "syntax_error"

    def test_evaluate_invalid_options(self, client):
        response = client.post(
            "/api/v1/evaluate",
            json={"expression": "(add 1 1)", "options": {"max_depth": 0}},
        )
        assert response.status_code == 422


class TestEvaluateLimits:
    """Tests that resource limits are validated and failures reported."""

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_depth_option_above_limit(self, client):
        """Test a deep input with an oversized max_depth is refused, not crashed."""
        response = client.post(
            "/api/v1/evaluate",
            json={"expression": nested(3000), "options": {"max_depth": 5000}},
        )
        assert response.status_code == 422

    def test_depth_option_one_past_limit(self, client):
        response = client.post(
            "/api/v1/evaluate",
            json={"expression": "(add 1 1)", "options": {"max_depth": MAX_DEPTH_LIMIT + 1}},
        )
        assert response.status_code == 422

    def test_very_deep_input_default_options(self, client):
        response = client.post("/api/v1/evaluate", json={"expression": nested(3000)})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["error_kind"] == "syntax_error"

    def test_depth_at_limit(self, client):
        response = client.post(
            "/api/v1/evaluate",
            json={"expression": nested(MAX_DEPTH_LIMIT), "options": {"max_depth": MAX_DEPTH_LIMIT}},
        )
        assert response.status_code == 200
        assert response.json()["result"] == "1"

    def test_input_length_at_limit(self, client):
        expression = "(add 1 1)"
        exact = client.post(
            "/api/v1/evaluate",
            json={"expression": expression, "options": {"max_input_length": len(expression)}},
        )
        short = client.post(
            "/api/v1/evaluate",
            json={"expression": expression, "options": {"max_input_length": len(expression) - 1}},
        )
        assert exact.json()["result"] == "2"
        assert short.json()["error_kind"] == "syntax_error"

    def test_non_positive_input_length(self, client):
        response = client.post(
            "/api/v1/evaluate",
            json={"expression": "(add 1 1)", "options": {"max_input_length": 0}},
        )
        assert response.status_code == 422


class TestOperatorsAPI:
    """Tests for the operators API endpoint."""

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_list_operators(self, client):
        response = client.get("/api/v1/operators")
        assert response.status_code == 200
        data = response.json()
        assert data["registry_id"] == "default"
        assert [op["name"] for op in data["operators"]] == ["add", "multiply"]
