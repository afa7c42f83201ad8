from pathlib import Path
from typing import List, Protocol, runtime_checkable


@runtime_checkable
class GitRemoteProtocol(Protocol):
    """Read-only access to upstream repositories."""

    def repo_url(self, repository: str) -> str: ...

    def clone(self, repo_url: str, branch: str, dst: Path) -> Path: ...

    def list_tags(self, repo_url: str) -> List[str]: ...


@runtime_checkable
class LocalRepositoryProtocol(Protocol):
    """The repository that receives grammar tags."""

    def tag_exists(self, name: str) -> bool: ...

    def create_tag(self, name: str) -> None: ...
