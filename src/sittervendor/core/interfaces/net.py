from __future__ import annotations
from pathlib import Path
from typing import Protocol, runtime_checkable

from sittervendor.core.models import FetchRequest, FetchResponse


@runtime_checkable
class HTTPTransportProtocol(Protocol):
    def request(self, req: FetchRequest) -> FetchResponse:
        ...


@runtime_checkable
class RawFetcherProtocol(Protocol):
    """Retrieves single files of an upstream repository at a release tag."""

    def fetch(self, repository: str, tag: str, remote_path: str) -> bytes:
        ...

    def fetch_to(self, repository: str, tag: str, remote_path: str, dst: Path) -> Path:
        ...
