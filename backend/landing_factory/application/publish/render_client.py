"""
Render trigger clients used by the publish pipeline.

Both clients honour the same contract: ``render_site(site_id, build_id)``
returns ``{"ok", "artifactPath", "outDir", "pages"}`` or raises
RenderFailure with diagnostic text.
"""
from typing import Any, Dict, Optional

import httpx
from flask import current_app

from landing_factory.application.build.build_site import build_site
from landing_factory.domain.exceptions import RenderFailure
from landing_factory.utils.decorators import ADMIN_TOKEN_HEADER


class InProcessRenderClient:
    """Runs the site build orchestrator inside the calling process."""

    def __init__(self, *, session, output_root: str):
        self.session = session
        self.output_root = output_root

    def render_site(self, site_id: str, build_id: str) -> Dict[str, Any]:
        try:
            return build_site(
                session=self.session,
                site_id=site_id,
                build_id=build_id,
                output_root=self.output_root,
            )
        except Exception as exc:
            self.session.rollback()
            raise RenderFailure(f"Renderer error: {exc}") from exc


class HttpRenderClient:
    """Calls a renderer service over HTTP with a bounded timeout."""

    def __init__(
        self,
        *,
        base_url: str,
        admin_token: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.admin_token = admin_token
        self.timeout = timeout
        self.transport = transport

    def render_site(self, site_id: str, build_id: str) -> Dict[str, Any]:
        url = f"{self.base_url}/api/v1/render/site/{site_id}"

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(
                    url,
                    json={"buildId": build_id},
                    headers={ADMIN_TOKEN_HEADER: self.admin_token},
                )
        except httpx.TimeoutException as exc:
            raise RenderFailure(f"Renderer timed out after {self.timeout}s") from exc
        except httpx.HTTPError as exc:
            raise RenderFailure(f"Renderer unreachable: {exc}") from exc

        if response.is_error:
            raise RenderFailure(f"Renderer error: {response.text}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise RenderFailure(f"Renderer returned invalid JSON: {response.text[:200]}") from exc

        if not isinstance(payload, dict) or not payload.get("ok"):
            raise RenderFailure(f"Renderer error: {response.text}")
        return payload


def make_render_client(*, session, config=None):
    """Pick the render client configured by ``RENDER_MODE``."""
    config = config if config is not None else current_app.config
    mode = config.get("RENDER_MODE", "inprocess")

    if mode == "http":
        return HttpRenderClient(
            base_url=config["RENDERER_URL"],
            admin_token=config.get("ADMIN_TOKEN", ""),
            timeout=float(config.get("RENDER_TIMEOUT_SECONDS", 30)),
        )
    if mode == "inprocess":
        return InProcessRenderClient(session=session, output_root=config["OUTPUT_ROOT"])

    raise ValueError(f"Unknown RENDER_MODE: {mode}")
