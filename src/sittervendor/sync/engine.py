from __future__ import annotations
"""Materialization of the parsing engine at a pinned release.

The full upstream checkout only lives in a scratch directory; the destination
root receives the public headers, the top-level sources and internal headers,
and the unicode headers, all with flattened include paths.
"""

import logging
import shutil
from pathlib import Path
from typing import List, Optional

from sittervendor.constants import (
    ENGINE_AGGREGATE_SOURCE,
    ENGINE_REPOSITORY,
    SCRATCH_DIR_NAME,
)
from sittervendor.core.interfaces.git import GitRemoteProtocol
from sittervendor.core.interfaces.text import TextPatcherProtocol
from sittervendor.logging.helpers import get_logger
from sittervendor.processing.rules import ENGINE_NAMESPACE_RULE, UNICODE_NAMESPACE_RULE
from sittervendor.processing.text_patcher import TextPatcher
from sittervendor.registry import DEFAULT_REGISTRY, Registry
from sittervendor.vcs.git_remote import GitRemote


def _sorted_glob(root: Path, pattern: str) -> List[Path]:
    return sorted(p for p in root.glob(pattern) if p.is_file())


class EngineSynchronizer:
    def __init__(
        self,
        dest: Path,
        *,
        registry: Registry = DEFAULT_REGISTRY,
        git: Optional[GitRemoteProtocol] = None,
        patcher: Optional[TextPatcherProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._dest = Path(dest)
        self._registry = registry
        self._log = logger or get_logger('sync.engine')
        self._git = git or GitRemote(logger=self._log)
        self._patcher = patcher or TextPatcher(logger=self._log)

    @property
    def scratch(self) -> Path:
        return self._dest / SCRATCH_DIR_NAME

    def _patch(self, checkout: Path, version: str) -> None:
        src = checkout / 'lib' / 'src'
        top_headers = _sorted_glob(src, '*.h')
        self._patcher.rewrite_many(_sorted_glob(src, '*.c') + top_headers, [ENGINE_NAMESPACE_RULE])
        self._patcher.rewrite_many(_sorted_glob(src / 'unicode', '*.h') + top_headers, [UNICODE_NAMESPACE_RULE])

        for fix in self._registry.compatibility_fixes(version):
            self._patcher.insert_include(checkout / fix.relpath, fix.line)

    def _copy(self, checkout: Path) -> List[Path]:
        lib = checkout / 'lib'
        sources = (
            _sorted_glob(lib / 'include' / 'tree_sitter', '*.h')
            + _sorted_glob(lib / 'src', '*.c')
            + _sorted_glob(lib / 'src', '*.h')
            + _sorted_glob(lib / 'src' / 'unicode', '*.h')
        )
        self._dest.mkdir(parents=True, exist_ok=True)
        copied: List[Path] = []
        for src in sources:
            dst = self._dest / src.name
            shutil.copyfile(src, dst)
            copied.append(dst)
        return copied

    def sync(self, version: Optional[str] = None) -> List[Path]:
        """Vendor the engine at ``version`` (registry pin by default).

        Returns the files written to the destination root.
        """
        version = version or self._registry.engine_version()
        self._log.info('downloading %s %s', ENGINE_REPOSITORY, version)

        try:
            checkout = self._git.clone(self._git.repo_url(ENGINE_REPOSITORY), version, self.scratch)
            self._patch(checkout, version)
            copied = self._copy(checkout)
        finally:
            shutil.rmtree(self.scratch, ignore_errors=True)

        # Every .c is compiled on its own, lib.c would define everything twice.
        aggregate = self._dest / ENGINE_AGGREGATE_SOURCE
        if aggregate.exists():
            aggregate.unlink()
        else:
            self._log.warning('⚠  %s not found in %s %s', ENGINE_AGGREGATE_SOURCE, ENGINE_REPOSITORY, version)
        copied = [p for p in copied if p != aggregate]

        self._log.info('✔ %s %s: %d files', ENGINE_REPOSITORY, version, len(copied))
        return copied
