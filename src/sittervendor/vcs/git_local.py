from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from sittervendor.core.interfaces.git import LocalRepositoryProtocol
from sittervendor.logging.helpers import get_logger
from sittervendor.vcs.commands import run_git


class LocalRepository(LocalRepositoryProtocol):
    """The working repository that receives grammar tags (tags point at HEAD)."""

    def __init__(self, root: Path, *, logger: Optional[logging.Logger] = None) -> None:
        self._root = Path(root)
        self._log = logger or get_logger('vcs.local')

    @property
    def root(self) -> Path:
        return self._root

    def tag_exists(self, name: str) -> bool:
        proc = run_git(
            ['rev-parse', '-q', '--verify', f'refs/tags/{name}'],
            cwd=self._root,
            logger=self._log,
            check=False,
        )
        return proc.returncode == 0

    def create_tag(self, name: str) -> None:
        run_git(['tag', name], cwd=self._root, logger=self._log)
