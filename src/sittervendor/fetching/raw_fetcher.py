from __future__ import annotations
"""
Raw file retrieval from the upstream source host.

Each call downloads exactly one file of one repository at one release tag:

    {raw_host}/{owner}/{repository}/{tag}/{remote_path}

Any failure (connection error, non-2xx status) raises TransportError. There is
no retry and no partial result: a missing file at a pinned tag means the pin is
wrong, and the whole run has to stop.
"""
import logging
from pathlib import Path
from typing import Callable, Optional

from sittervendor.constants import RAW_HOST, UPSTREAM_OWNER
from sittervendor.core.errors import TransportError
from sittervendor.core.interfaces.net import HTTPTransportProtocol, RawFetcherProtocol
from sittervendor.core.models import FetchRequest
from sittervendor.logging.helpers import get_logger, trace_io
from sittervendor.net.urllib_transport import UrllibHTTPTransport
from sittervendor.utils.net import DEFAULT_UA


class RawFileFetcher(RawFetcherProtocol):
    def __init__(
        self,
        *,
        raw_host: str = RAW_HOST,
        owner: str = UPSTREAM_OWNER,
        logger: Optional[logging.Logger] = None,
        user_agent: str = DEFAULT_UA,
        ssl_ctx_provider: Optional[Callable[[str], Optional[object]]] = None,
        transport: Optional[HTTPTransportProtocol] = None,
        timeout: float = 30.0,
    ) -> None:
        self._host = raw_host.rstrip('/')
        self._owner = owner
        self._log = logger or get_logger('fetching.raw')
        self._ua = user_agent
        self._timeout = timeout
        self._http: HTTPTransportProtocol = transport or UrllibHTTPTransport(
            user_agent=self._ua, ssl_ctx_provider=ssl_ctx_provider
        )

    def url_for(self, repository: str, tag: str, remote_path: str) -> str:
        return f'{self._host}/{self._owner}/{repository}/{tag}/{remote_path.lstrip("/")}'

    def fetch(self, repository: str, tag: str, remote_path: str) -> bytes:
        url = self.url_for(repository, tag, remote_path)
        trace_io(self._log, 'GET', url=url)
        try:
            resp = self._http.request(
                FetchRequest(method='GET', url=url, headers={'User-Agent': self._ua}, timeout=self._timeout)
            )
        except Exception as exc:
            raise TransportError(url, exc) from exc

        if not 200 <= resp.status < 300:
            raise TransportError(url, f'HTTP {resp.status}')
        return resp.body

    def fetch_to(self, repository: str, tag: str, remote_path: str, dst: Path) -> Path:
        body = self.fetch(repository, tag, remote_path)
        dst = Path(dst)
        dst.parent.mkdir(parents=True, exist_ok=True)
        dst.write_bytes(body)
        self._log.debug('✔ fetched %s@%s:%s → %s', repository, tag, remote_path, dst)
        return dst
