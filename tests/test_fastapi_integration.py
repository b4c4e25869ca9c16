"""
Tests for FastAPI integration (integrations/fastapi.py)
"""
import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from cache_headers import CacheHeadersConfig, DirectiveSet, HeaderController
from cache_headers.config import get_settings
from cache_headers.integrations.fastapi import (
    cache_headers,
    get_cache_headers,
    install_cache_headers,
)


@pytest.fixture
def app():
    app = FastAPI()
    cdn_cache = cache_headers("Cache-Control", "CDN-Cache-Control")

    @app.get("/public")
    async def public(cache: HeaderController = Depends(cdn_cache)):
        cache.set_public()
        cache.set_s_maxage(120, target="CDN-Cache-Control")
        cache.set_max_age(60, target="Cache-Control")
        return {"ok": True}

    @app.get("/assigned")
    async def assigned(cache: HeaderController = Depends(get_cache_headers)):
        requested = cache.get("Cache-Control")
        cache.assign("Cache-Control", DirectiveSet().set_private().set_max_age(requested.max_age or 60))
        return {"requested": str(requested)}

    return app


@pytest.fixture
def client(app):
    return TestClient(app)


class TestCacheHeadersDependency:
    def test_sets_headers(self, client):
        response = client.get("/public")
        assert response.status_code == 200
        assert response.headers["cache-control"] == "public, max-age=60"
        assert response.headers["cdn-cache-control"] == "public, s-maxage=120"

    def test_request_private_suppresses_shared_directives(self, client):
        response = client.get("/public", headers={"CDN-Cache-Control": "private"})
        assert response.headers["cache-control"] == "public, max-age=60"
        assert "cdn-cache-control" not in response.headers

    def test_request_no_store(self, client):
        response = client.get("/public", headers={"Cache-Control": "no-store"})
        assert "cache-control" not in response.headers
        assert response.headers["cdn-cache-control"] == "public, s-maxage=120"

    def test_oversized_request_value_is_ignored(self, client):
        response = client.get("/public", headers={"Cache-Control": "max-age=" + "1" * 5000})
        assert response.status_code == 200
        assert response.headers["cache-control"] == "public, max-age=60"

    def test_repeated_request_lines_are_combined(self, client):
        response = client.get(
            "/public",
            headers=[("Cache-Control", "public"), ("Cache-Control", "no-store")],
        )
        assert response.status_code == 200
        assert "cache-control" not in response.headers

    def test_controller_is_request_scoped(self, client):
        client.get("/public", headers={"Cache-Control": "no-store"})
        response = client.get("/public")
        assert response.headers["cache-control"] == "public, max-age=60"

    def test_factory_uses_config_names(self):
        dependency = cache_headers(config=CacheHeadersConfig(header_names=["Surrogate-Control"]))
        app = FastAPI()

        @app.get("/")
        async def index(cache: HeaderController = Depends(dependency)):
            cache.set_no_store()
            return {}

        response = TestClient(app).get("/")
        assert response.headers["surrogate-control"] == "no-store"


class TestInstalledConfig:
    def test_install_stores_config(self, app):
        config = install_cache_headers(app, "Cache-Control", "CDN-Cache-Control")
        assert app.state.cache_headers_config is config
        assert config.header_names == ["Cache-Control", "CDN-Cache-Control"]

    def test_assign_with_installed_config(self, app, client):
        install_cache_headers(app)
        response = client.get("/assigned", headers={"Cache-Control": "Public, Max-Age=30"})
        assert response.json() == {"requested": "max-age=30, public"}
        assert response.headers["cache-control"] == "max-age=30, private"

    def test_falls_back_to_environment(self, app, client, monkeypatch):
        monkeypatch.setenv("CACHE_HEADERS_HEADER_NAMES", "Cache-Control")
        get_settings.cache_clear()
        try:
            response = client.get("/assigned")
        finally:
            get_settings.cache_clear()
        assert response.headers["cache-control"] == "max-age=60, private"
