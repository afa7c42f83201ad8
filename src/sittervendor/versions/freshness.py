from __future__ import annotations
"""Staleness detection against upstream release tags.

"Latest" is the highest tag under PEP 440 ordering (``packaging``), which
matches semantic-version order for the ``vX.Y.Z`` tags used upstream. The
outdated flag is an exact-match test: any vendored tag that differs from the
detected latest is reported, including a pre-release that sorts above it.
"""

import logging
from typing import Iterable, List, Optional

from packaging.version import InvalidVersion, Version

from sittervendor.constants import (
    ENGINE_DISPLAY_NAME,
    ENGINE_REPOSITORY,
    ENGINE_TAG_PREFIX,
    GRAMMAR_TAG_PREFIX,
)
from sittervendor.core.errors import VersionQueryError
from sittervendor.core.interfaces.git import GitRemoteProtocol
from sittervendor.core.models import FreshnessEntry
from sittervendor.logging.helpers import get_logger
from sittervendor.registry import DEFAULT_REGISTRY, Registry
from sittervendor.vcs.git_remote import GitRemote


def _parse(tag: str) -> Optional[Version]:
    try:
        return Version(tag)
    except InvalidVersion:
        return None


def latest_release(tags: Iterable[str], prefix: str = GRAMMAR_TAG_PREFIX) -> Optional[str]:
    """Return the highest release tag starting with ``prefix``, or None."""
    best: Optional[str] = None
    best_version: Optional[Version] = None
    for tag in tags:
        if prefix and not tag.startswith(prefix):
            continue
        version = _parse(tag)
        if version is None:
            continue
        if best_version is None or version > best_version:
            best, best_version = tag, version
    return best


class FreshnessChecker:
    def __init__(
        self,
        *,
        registry: Registry = DEFAULT_REGISTRY,
        git: Optional[GitRemoteProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._registry = registry
        self._log = logger or get_logger('versions.freshness')
        self._git = git or GitRemote(logger=self._log)

    def check_one(self, name: str, repository: str, vendored: str, *, prefix: str) -> FreshnessEntry:
        url = self._git.repo_url(repository)
        try:
            tags = self._git.list_tags(url)
        except VersionQueryError as exc:
            self._log.warning('⚠  %s: %s', name, exc)
            return FreshnessEntry(name=name, vendored=vendored, remote_latest=None, outdated=False, error=str(exc))

        remote = latest_release(tags, prefix)
        entry = FreshnessEntry(name=name, vendored=vendored, remote_latest=remote, outdated=vendored != remote)
        self._log.debug('%s vendored=%s remote=%s', name, vendored, remote)
        return entry

    def check(self) -> List[FreshnessEntry]:
        """Engine first, then every grammar in registry order."""
        entries = [
            self.check_one(
                ENGINE_DISPLAY_NAME, ENGINE_REPOSITORY, self._registry.engine_version(), prefix=ENGINE_TAG_PREFIX
            )
        ]
        for grammar in self._registry.list_grammars():
            entries.append(
                self.check_one(grammar.name, grammar.repository, grammar.version, prefix=GRAMMAR_TAG_PREFIX)
            )
        return entries
