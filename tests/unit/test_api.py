"""Unit tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from principia.api import create_app
from principia.config import PrincipiaConfig
from principia.providers import StaticContentProvider
from tests.conftest import BRIDGE_TEXT, FailingProvider


def make_config(**server):
    return PrincipiaConfig.model_validate({"server": {"warm_up": False, **server}})


@pytest.fixture
def client():
    """TestClient over a static bridge provider, warm-up disabled."""
    provider = StaticContentProvider({"bridge": BRIDGE_TEXT, "Bridge engineering": "x"})
    with TestClient(create_app(make_config(), provider)) as c:
        yield c


class TestEnvelope:
    """Test the response envelope."""

    def test_health(self, client):
        """Test the health route envelope fields."""
        body = client.get("/health").json()
        assert body["success"] is True
        assert body["data"] == {"status": "ok"}
        assert body["error"] is None
        assert body["timestamp"]


class TestAnalyze:
    """Test the analyze routes."""

    def test_post(self, client):
        """Test POST /analyze with a JSON body."""
        resp = client.post("/analyze", json={"term": "bridge", "max_depth": 0, "max_results": 5})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["root_term"] == "bridge"
        assert data["tree"]["depth"] == 0
        assert data["tree"]["children"] == {}
        assert data["max_depth_reached"] == 0

    def test_get(self, client):
        """Test GET /analyze with query parameters."""
        data = client.get("/analyze", params={"term": "bridge", "max_depth": 1, "max_results": 2}).json()["data"]
        assert data["total_principles"] > 0
        assert len(data["tree"]["children"]) == 2
        categories = {p["category"] if isinstance(p["category"], str) else "Other" for p in data["tree"]["principles"]}
        assert "Structural" in categories

    def test_negative_depth_rejected(self, client):
        """Test a negative depth is a 400 envelope."""
        resp = client.post("/analyze", json={"term": "bridge", "max_depth": -1})
        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_missing_term_rejected(self, client):
        """Test a missing term is a 400."""
        assert client.get("/analyze").status_code == 400

    def test_provider_failure(self):
        """Test a root provider failure maps to 502."""
        with TestClient(create_app(make_config(), FailingProvider())) as c:
            resp = c.post("/analyze", json={"term": "bridge", "max_depth": 1})
        assert resp.status_code == 502
        body = resp.json()
        assert body["success"] is False
        assert "bridge" in body["error"]


class TestOtherRoutes:
    """Test suggestion, decomposition and cache routes."""

    def test_suggest(self, client):
        """Test suggestions are ranked."""
        data = client.get("/suggest", params={"query": "bridge"}).json()["data"]
        assert data[0]["term"] == "Bridge engineering"
        assert data[0]["category"] == "Structural"

    def test_decompose(self, client):
        """Test the decomposition payload."""
        data = client.get("/decompose", params={"concept": "uav", "max_depth": 2}).json()["data"]
        names = {c["name"] for c in data["components"]}
        assert {"motor", "battery"} <= names
        assert any(r["relation_type"] == "Requires" for r in data["relationships"])

    def test_cache_stats_and_clear(self, client):
        """Test cache stats reflect an analysis and reset on clear."""
        client.post("/analyze", json={"term": "bridge", "max_depth": 1})
        stats = client.get("/cache/stats").json()["data"]
        assert stats["wikipedia_pages_count"] == 1
        assert stats["analysis_nodes_count"] == 1
        assert client.post("/cache/clear").json()["data"] == {"cleared": True}
        stats = client.get("/cache/stats").json()["data"]
        assert stats["total_memory_usage"] == 0


class TestLifespan:
    """Test application startup and shutdown."""

    def test_sweeper_runs_while_serving(self):
        """Test the cache sweeper runs only while the app is up."""
        app = create_app(make_config(), StaticContentProvider())
        with TestClient(app):
            assert app.state.engine.cache.sweeping
        assert not app.state.engine.cache.sweeping

    def test_warm_up_does_not_block_shutdown(self):
        """Test warm-up runs without blocking shutdown."""
        config = PrincipiaConfig.model_validate({"engine": {"warm_up_terms": ["bridge"]}})
        app = create_app(config, StaticContentProvider({"bridge": BRIDGE_TEXT}))
        with TestClient(app) as c:
            assert c.get("/health").status_code == 200
        assert not app.state.engine.cache.sweeping


class TestMain:
    """Test the server entry point."""

    def test_runs_uvicorn_with_server_config(self, monkeypatch, tmp_path):
        """Test main passes host and port from the config file."""
        from principia.api import main as main_module

        calls = {}
        monkeypatch.setattr(main_module.uvicorn, "run", lambda app, **kw: calls.update(app=app, **kw))
        path = tmp_path / "config.yaml"
        path.write_text("server:\n  port: 9000\n  host: 127.0.0.1\n")
        main_module.main([str(path)])
        assert calls["port"] == 9000
        assert calls["host"] == "127.0.0.1"
        assert calls["app"].title == "Principia"
