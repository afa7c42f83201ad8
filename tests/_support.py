"""Shared fakes for the sittervendor test-suite (network and git free)."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

TOOLS_DIR = Path(__file__).resolve().parent / "tools"
if str(TOOLS_DIR) not in sys.path:
    sys.path.insert(0, str(TOOLS_DIR))

import build_fixtures  # noqa: E402

from sittervendor.core.errors import TransportError, VersionQueryError  # noqa: E402
from sittervendor.core.models import FetchRequest, FetchResponse  # noqa: E402

RAW = "https://raw.test"


class FakeTransport:
    """Serves bodies keyed by full URL; anything else is a 404."""

    def __init__(self, bodies: Optional[Dict[str, bytes]] = None) -> None:
        self.bodies: Dict[str, bytes] = dict(bodies or {})
        self.requests: List[FetchRequest] = []

    def add_repository(self, repository: str, tag: str, files: Dict[str, bytes], *, owner: str = "tree-sitter") -> None:
        for path, body in files.items():
            self.bodies[f"{RAW}/{owner}/{repository}/{tag}/{path}"] = body

    def request(self, req: FetchRequest) -> FetchResponse:
        self.requests.append(req)
        if req.url in self.bodies:
            return FetchResponse(status=200, headers={}, body=self.bodies[req.url], final_url=req.url)
        return FetchResponse(status=404, headers={}, body=b"404: Not Found", final_url=req.url)


class FakeGitRemote:
    """Clones by writing the fixture checkout; tags come from a dict."""

    def __init__(
        self,
        tags: Optional[Dict[str, List[str]]] = None,
        *,
        fail_clone: bool = False,
        failing_repos: Tuple[str, ...] = (),
        with_unicode_includes: bool = True,
    ) -> None:
        self.tags = dict(tags or {})
        self.fail_clone = fail_clone
        self.failing_repos = failing_repos
        self.with_unicode_includes = with_unicode_includes
        self.clones: List[Tuple[str, str, Path]] = []

    def repo_url(self, repository: str) -> str:
        return f"https://git.test/tree-sitter/{repository}.git"

    def clone(self, repo_url: str, branch: str, dst: Path) -> Path:
        self.clones.append((repo_url, branch, Path(dst)))
        if self.fail_clone:
            raise TransportError(repo_url, "remote branch not found")
        return build_fixtures.build_engine_checkout(
            Path(dst), with_unicode_includes=self.with_unicode_includes
        )

    def list_tags(self, repo_url: str) -> List[str]:
        name = repo_url.rsplit("/", 1)[-1][: -len(".git")]
        if name in self.failing_repos:
            raise VersionQueryError(repo_url, "could not read from remote repository")
        return list(self.tags.get(name, []))


class FakeLocalRepository:
    def __init__(self, existing: Optional[List[str]] = None) -> None:
        self.tags: List[str] = list(existing or [])
        self.create_calls: List[str] = []

    def tag_exists(self, name: str) -> bool:
        return name in self.tags

    def create_tag(self, name: str) -> None:
        self.create_calls.append(name)
        if name in self.tags:
            raise AssertionError(f"tag {name} created twice")
        self.tags.append(name)
