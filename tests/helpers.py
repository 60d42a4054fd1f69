"""In-process fake registry for exercising the HTTP operations."""

import asyncio
from dataclasses import dataclass, field

from aiohttp import web

from registry_images.core.types import CredentialRequest


@dataclass
class RecordedRequest:
    method: str
    path: str
    headers: dict[str, str]


@dataclass
class FakeRegistry:
    """Registry V2 endpoints backed by plain dictionaries.

    Set the *_status attributes to force an endpoint to fail.
    """

    repositories: list[str] = field(default_factory=list)
    tags: dict[str, list[str] | None] = field(default_factory=dict)
    digests: dict[str, str] = field(default_factory=dict)
    catalog_status: int = 200
    tags_status: dict[str, int] = field(default_factory=dict)
    head_status: int = 200
    delete_status: int = 202
    gc_status: int = 202
    omit_digest_header: bool = False
    catalog_delay: float = 0
    gc_delay: float = 0
    requests: list[RecordedRequest] = field(default_factory=list)

    def calls(self, method: str | None = None) -> list[str]:
        """Paths requested, optionally limited to one HTTP method."""
        return [
            f"{r.method} {r.path}"
            for r in self.requests
            if method is None or r.method == method
        ]

    @web.middleware
    async def _record(self, request: web.Request, handler):
        self.requests.append(
            RecordedRequest(request.method, request.path, dict(request.headers))
        )
        return await handler(request)

    async def _catalog(self, request: web.Request) -> web.Response:
        await asyncio.sleep(self.catalog_delay)
        if self.catalog_status != 200:
            return web.Response(status=self.catalog_status)
        return web.json_response({"repositories": self.repositories})

    async def _tags(self, request: web.Request) -> web.Response:
        repo = request.match_info["repo"]
        status = self.tags_status.get(repo, 200)
        if status != 200:
            return web.Response(status=status)
        if repo not in self.tags:
            return web.json_response({"name": repo})
        return web.json_response({"name": repo, "tags": self.tags[repo]})

    async def _head_manifest(self, request: web.Request) -> web.Response:
        ref = f"{request.match_info['repo']}:{request.match_info['reference']}"
        if self.head_status != 200:
            return web.Response(status=self.head_status)
        if ref not in self.digests:
            return web.Response(status=404)
        headers = {} if self.omit_digest_header else {
            "Docker-Content-Digest": self.digests[ref]
        }
        return web.Response(status=200, headers=headers)

    async def _delete_manifest(self, request: web.Request) -> web.Response:
        ref = f"{request.match_info['repo']}:{request.match_info['reference']}"
        if self.delete_status >= 300:
            return web.Response(status=self.delete_status)
        self.digests.pop(ref, None)
        return web.Response(status=self.delete_status)

    async def _gc(self, request: web.Request) -> web.Response:
        await asyncio.sleep(self.gc_delay)
        return web.Response(status=self.gc_status)

    def make_app(self) -> web.Application:
        app = web.Application(middlewares=[self._record])
        app.router.add_get("/v2/_catalog", self._catalog, allow_head=False)
        app.router.add_put("/v2/gc/layers", self._gc)
        app.router.add_get("/v2/{repo:.+}/tags/list", self._tags, allow_head=False)
        app.router.add_route(
            "HEAD", "/v2/{repo:.+}/manifests/{reference}", self._head_manifest
        )
        app.router.add_delete(
            "/v2/{repo:.+}/manifests/{reference}", self._delete_manifest
        )
        return app


class FakeIssuer:
    """Credential issuer that hands out a fixed password and records calls."""

    def __init__(self, password: str = "secret", error: Exception | None = None):
        self.password = password
        self.error = error
        self.calls: list[tuple[str, CredentialRequest]] = []

    async def __call__(self, host: str, request: CredentialRequest) -> str:
        self.calls.append((host, request))
        if self.error is not None:
            raise self.error
        return self.password


def static_account(account_id: str):
    async def resolve() -> str:
        return account_id

    return resolve
