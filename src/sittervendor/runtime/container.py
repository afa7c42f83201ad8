from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping, Optional

from sittervendor.constants import DEFAULT_GO_MODULE, GIT_HOST, RAW_HOST, UPSTREAM_OWNER
from sittervendor.core.interfaces.git import GitRemoteProtocol, LocalRepositoryProtocol
from sittervendor.core.interfaces.net import HTTPTransportProtocol, RawFetcherProtocol
from sittervendor.core.interfaces.text import TextPatcherProtocol
from sittervendor.fetching.raw_fetcher import RawFileFetcher
from sittervendor.logging.helpers import get_logger
from sittervendor.processing.text_patcher import TextPatcher
from sittervendor.publishing.tags import TagPublisher
from sittervendor.registry import DEFAULT_REGISTRY, Registry
from sittervendor.runtime.go_tests import GoTestRunner
from sittervendor.runtime.runner import VendorRunner
from sittervendor.sync.engine import EngineSynchronizer
from sittervendor.sync.grammar import GrammarSynchronizer
from sittervendor.utils.net import ssl_context_for
from sittervendor.vcs.git_local import LocalRepository
from sittervendor.vcs.git_remote import GitRemote
from sittervendor.versions.freshness import FreshnessChecker


@dataclass(frozen=True)
class VendorConfig:
    """Immutable run configuration resolved from CLI flags and environment."""
    dest: Path
    logger: logging.Logger = field(default_factory=lambda: get_logger())
    jobs: int = 1
    output_format: str = 'text'
    raw_host: str = RAW_HOST
    git_host: str = GIT_HOST
    owner: str = UPSTREAM_OWNER
    go_module: str = DEFAULT_GO_MODULE
    ssl_ctx_provider: Callable[[str], Optional[object]] = ssl_context_for

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, **overrides) -> 'VendorConfig':
        """Build a config from SITTERVENDOR_* variables; explicit overrides win when not None."""
        env = os.environ if env is None else env
        values = {
            'dest': Path(env.get('SITTERVENDOR_DEST') or Path.cwd()),
            'raw_host': env.get('SITTERVENDOR_RAW_HOST') or RAW_HOST,
            'go_module': env.get('SITTERVENDOR_GO_MODULE') or DEFAULT_GO_MODULE,
        }
        jobs = env.get('SITTERVENDOR_JOBS')
        if jobs:
            try:
                values['jobs'] = int(jobs)
            except ValueError as exc:
                raise ValueError(f'SITTERVENDOR_JOBS must be numeric, got {jobs!r}') from exc
        values.update({k: v for k, v in overrides.items() if v is not None})
        values['dest'] = Path(values['dest'])
        if int(values.get('jobs', 1)) < 1:
            raise ValueError('jobs must be at least 1')
        return cls(**values)


@dataclass
class VendorBuilder:
    """Wires default collaborators into a VendorRunner; any of them can be overridden."""
    config: VendorConfig
    registry: Registry = DEFAULT_REGISTRY
    transport: Optional[HTTPTransportProtocol] = None
    fetcher: Optional[RawFetcherProtocol] = None
    git: Optional[GitRemoteProtocol] = None
    patcher: Optional[TextPatcherProtocol] = None
    local_repo: Optional[LocalRepositoryProtocol] = None
    go_tests: Optional[GoTestRunner] = None

    def _logger(self, name: str) -> logging.Logger:
        return self.config.logger.getChild(name)

    def build(self) -> VendorRunner:
        cfg = self.config
        patcher = self.patcher or TextPatcher(logger=self._logger('processing'))
        git = self.git or GitRemote(host=cfg.git_host, owner=cfg.owner, logger=self._logger('vcs'))
        fetcher = self.fetcher or RawFileFetcher(
            raw_host=cfg.raw_host,
            owner=cfg.owner,
            logger=self._logger('fetching'),
            ssl_ctx_provider=cfg.ssl_ctx_provider,
            transport=self.transport,
        )
        repo = self.local_repo or LocalRepository(cfg.dest, logger=self._logger('vcs'))

        return VendorRunner(
            engine=EngineSynchronizer(
                cfg.dest, registry=self.registry, git=git, patcher=patcher, logger=self._logger('sync.engine')
            ),
            grammars=GrammarSynchronizer(
                cfg.dest, registry=self.registry, fetcher=fetcher, patcher=patcher, logger=self._logger('sync.grammar')
            ),
            freshness=FreshnessChecker(registry=self.registry, git=git, logger=self._logger('versions')),
            tags=TagPublisher(repo, registry=self.registry, logger=self._logger('publishing')),
            go_tests=self.go_tests or GoTestRunner(
                cfg.dest, module=cfg.go_module, registry=self.registry, logger=self._logger('go')
            ),
            registry=self.registry,
            jobs=cfg.jobs,
            logger=cfg.logger,
        )
