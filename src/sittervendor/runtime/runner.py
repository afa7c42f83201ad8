from __future__ import annotations
"""Verb dispatch for the vendoring workflow.

``download`` runs the engine synchronization first, then every grammar.
Grammars share no state, so with ``jobs > 1`` they run on a bounded thread
pool; the first failure cancels whatever has not started and is re-raised.
Tagging always runs sequentially in registry order.
"""

import logging
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import TYPE_CHECKING, List, Optional

from sittervendor.constants import ENGINE_DISPLAY_NAME
from sittervendor.core.models import FreshnessEntry, GrammarDescriptor, TagResult
from sittervendor.core.report import StageTimer, SyncReport
from sittervendor.logging.helpers import get_logger
from sittervendor.registry import DEFAULT_REGISTRY, Registry

if TYPE_CHECKING:
    from sittervendor.publishing.tags import TagPublisher
    from sittervendor.runtime.go_tests import GoTestRunner
    from sittervendor.sync.engine import EngineSynchronizer
    from sittervendor.sync.grammar import GrammarSynchronizer
    from sittervendor.versions.freshness import FreshnessChecker


class VendorRunner:
    def __init__(
        self,
        *,
        engine: 'EngineSynchronizer',
        grammars: 'GrammarSynchronizer',
        freshness: 'FreshnessChecker',
        tags: 'TagPublisher',
        go_tests: 'GoTestRunner',
        registry: Registry = DEFAULT_REGISTRY,
        jobs: int = 1,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._engine = engine
        self._grammars = grammars
        self._freshness = freshness
        self._tags = tags
        self._go_tests = go_tests
        self._registry = registry
        self._jobs = max(1, int(jobs))
        self._log = logger or get_logger('runner')

    def _sync_sequential(self, grammars: List[GrammarDescriptor], report: SyncReport) -> None:
        for grammar in grammars:
            report.add_files(grammar.name, len(self._grammars.sync(grammar)))

    def _sync_parallel(self, grammars: List[GrammarDescriptor], report: SyncReport) -> None:
        with ThreadPoolExecutor(max_workers=self._jobs, thread_name_prefix='grammar') as pool:
            futures: List[Future] = [pool.submit(self._grammars.sync, g) for g in grammars]
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            for fut in pending:
                fut.cancel()
            for fut in futures:
                if fut in done and fut.exception() is not None:
                    raise fut.exception()
        # Registry order keeps the report stable regardless of completion order.
        for grammar, fut in zip(grammars, futures):
            report.add_files(grammar.name, len(fut.result()))

    def download(self) -> SyncReport:
        report = SyncReport()
        with StageTimer(report, 'engine'):
            report.add_files(ENGINE_DISPLAY_NAME, len(self._engine.sync(self._registry.engine_version())))

        grammars = list(self._registry.list_grammars())
        with StageTimer(report, 'grammars'):
            if self._jobs > 1 and len(grammars) > 1:
                self._sync_parallel(grammars, report)
            else:
                self._sync_sequential(grammars, report)

        report.finish()
        self._log.info('✔ download finished: %d files in %.1fs', report.files_total, report.duration_s or 0.0)
        return report

    def check_updates(self) -> List[FreshnessEntry]:
        return self._freshness.check()

    def tag_grammars(self) -> List[TagResult]:
        return self._tags.publish()

    def test(self) -> None:
        self._go_tests.run()
