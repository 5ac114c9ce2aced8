"""Tests for the FastAPI application: lifespan, handlers and middleware."""

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from ldnexus.core.errors import ValidationError
from ldnexus.main import create_app
from ldnexus.providers.embedding.mock_adapter import MockEmbeddingProvider
from ldnexus.providers.errors import AuthenticationError


@pytest.fixture
def app():
    """Create test application instance."""
    return create_app()


@pytest.fixture
async def client(app):
    """Create async HTTP client for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_healthy_status(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestAPIVersioning:
    """Tests for API versioning."""

    @pytest.mark.asyncio
    async def test_v1_router_mounted(self, client):
        """Unknown v1 paths are plain 404s."""
        response = await client.get("/api/v1/nonexistent")
        assert response.status_code == 404


class TestLifespan:
    """The lifespan validates the embedding client once."""

    @pytest.mark.asyncio
    async def test_stores_validated_client(self, app):
        provider = MockEmbeddingProvider()
        with patch("ldnexus.main.create_embedding_provider", return_value=provider):
            async with app.router.lifespan_context(app):
                client = app.state.embedding_client
                assert client.is_available() is True

        assert provider.calls == [{"method": "embed", "texts": ["test"]}]

    @pytest.mark.asyncio
    async def test_missing_key_leaves_client_unavailable(self, app):
        with patch("ldnexus.main.create_embedding_provider", return_value=None):
            async with app.router.lifespan_context(app):
                assert app.state.embedding_client.is_available() is False

    @pytest.mark.asyncio
    async def test_rejected_key_leaves_client_unavailable(self, app):
        provider = MockEmbeddingProvider(error=AuthenticationError("bad key"))
        with patch("ldnexus.main.create_embedding_provider", return_value=provider):
            async with app.router.lifespan_context(app):
                assert app.state.embedding_client.is_available() is False


class TestExceptionHandlers:
    """Custom exceptions become HTTP responses with the error envelope."""

    @pytest.mark.asyncio
    async def test_validation_error_returns_400(self, app, client):
        @app.get("/test/validation-error")
        async def raise_validation_error():
            raise ValidationError("Invalid input", details=[{"field": "test"}])

        response = await client.get("/test/validation-error")
        assert response.status_code == 400
        assert response.json() == {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid input",
                "details": [{"field": "test"}],
            }
        }

    @pytest.mark.asyncio
    async def test_unhandled_exception_hides_details(self, app):
        @app.get("/test/unhandled")
        async def raise_unhandled():
            raise RuntimeError("secret connection string")

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.get("/test/unhandled")

        assert response.status_code == 500
        assert response.json()["error"] == {
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "details": None,
        }


class TestCORSMiddleware:
    """Tests for CORS middleware configuration."""

    @pytest.mark.asyncio
    async def test_cors_allows_configured_origin(self, client):
        response = await client.options(
            "/health",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.status_code == 200
        assert (
            response.headers.get("access-control-allow-origin")
            == "http://localhost:3000"
        )

    @pytest.mark.asyncio
    async def test_cors_denies_unconfigured_origin(self):
        with patch("ldnexus.main.settings.allowed_origins", ["http://allowed-origin.com"]):
            test_app = create_app()
            transport = ASGITransport(app=test_app)
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                response = await ac.options(
                    "/health",
                    headers={
                        "Origin": "http://malicious-site.com",
                        "Access-Control-Request-Method": "GET",
                    },
                )
                allowed_origin = response.headers.get("access-control-allow-origin")
                assert allowed_origin != "http://malicious-site.com"


class TestSecurityHeadersMiddleware:
    """Tests for security headers middleware."""

    @pytest.mark.asyncio
    async def test_standard_headers(self, client):
        response = await client.get("/health")
        assert response.headers.get("x-frame-options") == "DENY"
        assert response.headers.get("x-content-type-options") == "nosniff"
        assert "default-src 'none'" in response.headers.get("content-security-policy")

    @pytest.mark.asyncio
    async def test_api_responses_not_cached(self, client):
        response = await client.get("/api/v1/nonexistent")
        assert response.headers.get("cache-control") == "no-store, max-age=0"

    @pytest.mark.asyncio
    async def test_no_hsts_outside_production(self, client):
        response = await client.get("/health")
        assert "strict-transport-security" not in response.headers
