from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from sittervendor.constants import DEFAULT_GO_MODULE
from sittervendor.core.errors import VendorError
from sittervendor.logging.helpers import get_logger
from sittervendor.registry import DEFAULT_REGISTRY, Registry


class GoTestError(VendorError):
    """`go test` reported failures."""


class GoTestRunner:
    """Runs the Go test-suite of the vendoring module and of every grammar package."""

    def __init__(
        self,
        root: Path,
        *,
        module: str = DEFAULT_GO_MODULE,
        registry: Registry = DEFAULT_REGISTRY,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._root = Path(root)
        self._module = module.rstrip('/')
        self._registry = registry
        self._log = logger or get_logger('go')

    def packages(self) -> List[str]:
        pkgs = ['./...']
        for grammar in self._registry.list_grammars():
            target = self._registry.target_dir(grammar.name)
            if grammar.has_variants:
                pkgs.extend(f'{self._module}/{target}/{variant}' for variant in grammar.variants)
            else:
                pkgs.append(f'{self._module}/{target}')
        return pkgs

    def _go_test(self, package: str) -> int:
        cmd: Sequence[str] = ['go', 'test', package]
        self._log.info('running %s', ' '.join(cmd))
        try:
            return subprocess.call(cmd, cwd=str(self._root))
        except OSError as exc:
            raise GoTestError(f'could not run go: {exc}') from exc

    def run(self) -> None:
        failed = [pkg for pkg in self.packages() if self._go_test(pkg) != 0]
        if failed:
            raise GoTestError(f"go test failed for: {', '.join(failed)}")
