"""
Tests for the Flask JSON API.
"""

import pytest

from threepd.strategies import ALL_STRATEGIES
from threepd.web import create_app


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


class TestApi:
    """Tests for /api/strategies and /api/run."""

    def test_strategies(self, client):
        """All built-in strategies and the default payoffs are listed."""
        response = client.get("/api/strategies")
        assert response.status_code == 200
        data = response.get_json()
        assert [s["name"] for s in data["strategies"]] == [c.__name__ for c in ALL_STRATEGIES]
        assert data["payoffs"]["table"] == [[[6, 3], [3, 0]], [[8, 5], [5, 2]]]

    def test_run(self, client):
        """A small tournament returns matches and standings."""
        response = client.post(
            "/api/run",
            json={"strategies": ["AlwaysCooperate", "AlwaysDefect"], "seed": 3},
        )
        assert response.status_code == 200
        data = response.get_json()
        assert len(data["matches"]) == 4
        assert data["totals"] == [24.0, 24.0]
        assert [row["strategy"] for row in data["standings"]] == ["AlwaysCooperate", "AlwaysDefect"]

    def test_run_with_history(self, client):
        """Histories are included when asked for."""
        response = client.post(
            "/api/run",
            json={"strategies": ["AlwaysDefect"], "seed": 1, "history": True, "min_rounds": 3, "max_rounds": 3},
        )
        assert response.status_code == 200
        assert response.get_json()["matches"][0]["history_A"] == "DDD"

    @pytest.mark.parametrize("payload", [
        {"min_rounds": 0},
        {"min_rounds": 20, "max_rounds": 10},
        {"payoffs": [[[1, 1], [1, 1]], [[1, 1], [1, 1]]]},
        {"strategies": ["Nobody"]},
        {"seed": "abc"},
    ])
    def test_bad_requests(self, client, payload):
        """Invalid parameters are answered with 400 and an error message."""
        response = client.post("/api/run", json=payload)
        assert response.status_code == 400
        assert "error" in response.get_json()
