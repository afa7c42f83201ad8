from __future__ import annotations
"""Read-only access to upstream git repositories.

Two operations are needed: a shallow clone of the engine at a release tag,
and the tag list of any repository (``git ls-remote --tags --refs``). Both
map failures onto the typed errors of the run: a failed clone is a
TransportError, a failed listing a VersionQueryError.
"""

import logging
import shutil
from pathlib import Path
from typing import List, Optional

from sittervendor.constants import GIT_HOST, UPSTREAM_OWNER
from sittervendor.core.errors import GitCommandError, TransportError, VersionQueryError
from sittervendor.core.interfaces.git import GitRemoteProtocol
from sittervendor.logging.helpers import get_logger
from sittervendor.vcs.commands import run_git

_TAG_REF_PREFIX = 'refs/tags/'


class GitRemote(GitRemoteProtocol):
    def __init__(
        self,
        *,
        host: str = GIT_HOST,
        owner: str = UPSTREAM_OWNER,
        logger: Optional[logging.Logger] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._host = host.rstrip('/')
        self._owner = owner
        self._log = logger or get_logger('vcs.remote')
        self._timeout = timeout

    def repo_url(self, repository: str) -> str:
        """Return the clone URL of ``repository`` under the upstream owner."""
        return f'{self._host}/{self._owner}/{repository}.git'

    def clone(self, repo_url: str, branch: str, dst: Path) -> Path:
        """Shallow-clone ``repo_url`` at ``branch`` (a tag works too) into ``dst``.

        ``dst`` is removed first; clones are never reused.
        """
        dst = Path(dst)
        if dst.exists():
            shutil.rmtree(dst)
        dst.parent.mkdir(parents=True, exist_ok=True)
        args = ['clone', '--depth', '1', '--branch', branch, '--single-branch', repo_url, str(dst)]
        try:
            run_git(args, logger=self._log, timeout=self._timeout)
        except GitCommandError as exc:
            raise TransportError(repo_url, exc) from exc
        self._log.info('✔ cloned %s (%s) → %s', repo_url, branch, dst)
        return dst

    @staticmethod
    def parse_ls_remote(output: str) -> List[str]:
        """Extract tag names from ``git ls-remote --tags --refs`` output."""
        tags: List[str] = []
        for line in output.splitlines():
            parts = line.strip().split('\t', 1)
            if len(parts) != 2:
                continue
            ref = parts[1].strip()
            if ref.startswith(_TAG_REF_PREFIX):
                tags.append(ref[len(_TAG_REF_PREFIX):])
        return tags

    def list_tags(self, repo_url: str) -> List[str]:
        try:
            proc = run_git(['ls-remote', '--tags', '--refs', repo_url], logger=self._log, timeout=self._timeout)
        except GitCommandError as exc:
            raise VersionQueryError(repo_url, exc) from exc
        return self.parse_ls_remote(proc.stdout or '')
