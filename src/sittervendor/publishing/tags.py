from __future__ import annotations

import logging
from typing import List, Optional

from sittervendor.core.interfaces.git import LocalRepositoryProtocol
from sittervendor.core.models import GrammarDescriptor, TagResult
from sittervendor.logging.helpers import get_logger
from sittervendor.registry import DEFAULT_REGISTRY, Registry


class TagPublisher:
    """Tags the current commit once per grammar version.

    Tags are append-only: an existing tag is left where it points and reported
    with ``created=False``.
    """

    def __init__(
        self,
        repo: LocalRepositoryProtocol,
        *,
        registry: Registry = DEFAULT_REGISTRY,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repo = repo
        self._registry = registry
        self._log = logger or get_logger('publishing.tags')

    def tag_names(self, grammar: GrammarDescriptor) -> List[str]:
        target = self._registry.target_dir(grammar.name)
        if grammar.has_variants:
            return [f'{target}/{variant}/{grammar.version}' for variant in grammar.variants]
        return [f'{target}/{grammar.version}']

    def publish_one(self, name: str) -> TagResult:
        if self._repo.tag_exists(name):
            self._log.info('tag %s already exists, skipped', name)
            return TagResult(name=name, created=False)
        self._repo.create_tag(name)
        self._log.info('✔ created tag %s', name)
        return TagResult(name=name, created=True)

    def publish(self) -> List[TagResult]:
        results: List[TagResult] = []
        for grammar in self._registry.list_grammars():
            self._log.debug('tagging %s %s', grammar.name, grammar.version)
            for name in self.tag_names(grammar):
                results.append(self.publish_one(name))
        return results
