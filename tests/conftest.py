"""Shared fixtures for the SP-API codegen tests.

Unit tests run against an httpx.MockTransport and a fake process runner,
with the workspace rooted in tmp_path. Integration tests talk to the real
converter and are skipped when it is unreachable.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from sp_codegen.config import CodegenConfig
from sp_codegen.errors import CommandError
from sp_codegen.toolchain import CommandResult

from helpers import CONVERTER, MODEL_REPO, X_MODEL


# ---------------------------------------------------------------------------
# Fake HTTP — routes keyed by (method, path)
# ---------------------------------------------------------------------------

class FakeRoutes:
    """Request handler for httpx.MockTransport that records every request."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, url: str, status: int = 200, content: Any = b"") -> None:
        path = httpx.URL(url).path

        def respond(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, content=content)

        self.routes[(method.upper(), path)] = respond

    def calls(self, method: str, url: str) -> list[httpx.Request]:
        path = httpx.URL(url).path
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, content=b"no route")
        return handler(request)


@pytest.fixture
def routes() -> FakeRoutes:
    return FakeRoutes()


@pytest.fixture
async def client(routes):
    async with httpx.AsyncClient(transport=httpx.MockTransport(routes)) as c:
        yield c


# ---------------------------------------------------------------------------
# Fake process runner
# ---------------------------------------------------------------------------

class FakeRunner:
    """Stands in for run_command; records argv and can fail selected calls.

    ``fail_when`` is a predicate over the argv tuple. Successful oapi-codegen
    calls write a stub client to the -o path.
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self.calls: list[tuple[str, ...]] = []
        self.fail_when: Callable[[tuple[str, ...]], bool] = lambda args: False

    def codegen_calls(self) -> list[tuple[str, ...]]:
        return [c for c in self.calls if "-package" in c]

    async def __call__(self, *args: str, cwd: Path | None = None) -> CommandResult:
        self.calls.append(args)
        if self.fail_when(args):
            raise CommandError(args, 1, f"boom: {args[-1]}")
        if "-o" in args:
            out = (cwd or self.root) / args[args.index("-o") + 1]
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text("package stub\n")
        return CommandResult(args=args, returncode=0, stdout="", stderr="")


@pytest.fixture
def runner(tmp_path) -> FakeRunner:
    return FakeRunner(tmp_path)


# ---------------------------------------------------------------------------
# Config rooted in tmp_path with one model and an "installed" oapi-codegen
# ---------------------------------------------------------------------------

@pytest.fixture
def codegen_bin(tmp_path) -> Path:
    path = tmp_path / "bin" / "oapi-codegen"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\n")
    return path


@pytest.fixture
def config(tmp_path, codegen_bin) -> CodegenConfig:
    return CodegenConfig(
        root=tmp_path,
        models=(X_MODEL,),
        remote_model_repo=MODEL_REPO,
        converter_base=CONVERTER,
        codegen_path=codegen_bin,
        fetch_timeout=1.0,
        convert_timeout=1.0,
    )


# ---------------------------------------------------------------------------
# Integration — skip when the public converter cannot be reached
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def converter_available():
    """Skip integration tests if converter.swagger.io is unreachable."""
    try:
        resp = httpx.get("https://converter.swagger.io/api/openapi.json", timeout=10)
        if resp.status_code != 200:
            pytest.skip(f"converter returned {resp.status_code}")
    except httpx.RequestError:
        pytest.skip("converter.swagger.io not reachable")
