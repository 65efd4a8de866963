"""Unit tests for the render trigger clients."""

import json

import httpx
import pytest

from landing_factory.application.publish.render_client import (
    HttpRenderClient,
    InProcessRenderClient,
    make_render_client,
)
from landing_factory.domain.exceptions import RenderFailure


def _client(handler, timeout=5.0):
    return HttpRenderClient(
        base_url="http://renderer:3002/",
        admin_token="secret-token",
        timeout=timeout,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.unit
class TestHttpRenderClient:
    """Renderer service over HTTP."""

    def test_success_payload_returned(self) -> None:
        """A 200 with ``ok`` returns the payload; token and build id are sent."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["token"] = request.headers.get("X-Admin-Token")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"ok": True, "artifactPath": "/srv/www/a.com", "pages": 2})

        result = _client(handler).render_site("site-1", "build-1")

        assert result["artifactPath"] == "/srv/www/a.com"
        assert seen == {
            "url": "http://renderer:3002/api/v1/render/site/site-1",
            "token": "secret-token",
            "body": {"buildId": "build-1"},
        }

    def test_error_status(self) -> None:
        """Non-2xx responses are render failures carrying the body."""
        client = _client(lambda request: httpx.Response(500, json={"error": "disk full"}))

        with pytest.raises(RenderFailure, match="disk full"):
            client.render_site("site-1", "build-1")

    def test_not_ok_payload(self) -> None:
        """A 200 without ``ok`` is still a failure."""
        client = _client(lambda request: httpx.Response(200, json={"ok": False}))

        with pytest.raises(RenderFailure):
            client.render_site("site-1", "build-1")

    def test_invalid_json(self) -> None:
        """Unparseable bodies are failures."""
        client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(RenderFailure, match="invalid JSON"):
            client.render_site("site-1", "build-1")

    def test_timeout(self) -> None:
        """A timed-out render fails the build."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(RenderFailure, match="timed out after 1.5s"):
            _client(handler, timeout=1.5).render_site("site-1", "build-1")

    def test_unreachable(self) -> None:
        """Connection errors are failures."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(RenderFailure, match="unreachable"):
            _client(handler).render_site("site-1", "build-1")


@pytest.mark.unit
class TestMakeRenderClient:
    """Client selection by ``RENDER_MODE``."""

    def test_http_mode(self) -> None:
        """``http`` builds an HTTP client with the configured timeout."""
        client = make_render_client(
            session=None,
            config={
                "RENDER_MODE": "http",
                "RENDERER_URL": "http://renderer:3002",
                "ADMIN_TOKEN": "t",
                "RENDER_TIMEOUT_SECONDS": 12,
            },
        )

        assert isinstance(client, HttpRenderClient)
        assert client.timeout == 12.0

    def test_inprocess_mode(self) -> None:
        """``inprocess`` renders with the given session and output root."""
        client = make_render_client(
            session="session",
            config={"RENDER_MODE": "inprocess", "OUTPUT_ROOT": "/tmp/out"},
        )

        assert isinstance(client, InProcessRenderClient)
        assert (client.session, client.output_root) == ("session", "/tmp/out")

    def test_unknown_mode(self) -> None:
        """Unknown modes are configuration errors."""
        with pytest.raises(ValueError):
            make_render_client(session=None, config={"RENDER_MODE": "carrier-pigeon"})
