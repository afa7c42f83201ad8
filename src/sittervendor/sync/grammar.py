from __future__ import annotations
"""Vendoring of a single grammar descriptor.

Layout produced under the destination root::

    <target>/parser.h
    <target>/<file>...                      (plain grammars)

    <target>/<variant>/scanner.h            (grammars with variants; the
    <target>/<variant>/parser.h              shared header is copied into
    <target>/<variant>/<file>...             every variant directory)

``<target>`` is the registry's directory name for the grammar, which differs
from the upstream name for reserved identifiers (go -> golang).
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from sittervendor.constants import PARSER_HEADER, SHARED_HEADER_NAME, VENDORED_SUFFIXES
from sittervendor.core.interfaces.net import RawFetcherProtocol
from sittervendor.core.interfaces.text import TextPatcherProtocol
from sittervendor.core.models import GrammarDescriptor, RewriteRule
from sittervendor.fetching.raw_fetcher import RawFileFetcher
from sittervendor.logging.helpers import get_logger
from sittervendor.processing.rules import CANONICAL_PARSER_RULE, SHARED_SCANNER_RULE
from sittervendor.processing.text_patcher import TextPatcher
from sittervendor.registry import DEFAULT_REGISTRY, Registry


class GrammarSynchronizer:
    def __init__(
        self,
        dest: Path,
        *,
        registry: Registry = DEFAULT_REGISTRY,
        fetcher: Optional[RawFetcherProtocol] = None,
        patcher: Optional[TextPatcherProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._dest = Path(dest)
        self._registry = registry
        self._log = logger or get_logger('sync.grammar')
        self._fetcher = fetcher or RawFileFetcher(logger=self._log)
        self._patcher = patcher or TextPatcher(logger=self._log)

    def target_path(self, grammar: GrammarDescriptor) -> Path:
        return self._dest / self._registry.target_dir(grammar.name)

    def _clear_vendored(self, directory: Path) -> None:
        """Drop previously vendored sources; other files (bindings, tests) stay."""
        if not directory.is_dir():
            return
        for path in directory.iterdir():
            if path.is_file() and path.suffix in VENDORED_SUFFIXES:
                path.unlink()

    def _fetch_sources(
        self,
        grammar: GrammarDescriptor,
        src_prefix: str,
        target: Path,
        rules: Sequence[RewriteRule],
    ) -> List[Path]:
        ctx = {'grammar': grammar.name, 'version': grammar.version}
        written = [
            self._fetcher.fetch_to(
                grammar.repository, grammar.version, f'{src_prefix}/tree_sitter/{PARSER_HEADER}', target / PARSER_HEADER
            )
        ]
        for name in grammar.files:
            dst = self._fetcher.fetch_to(grammar.repository, grammar.version, f'{src_prefix}/{name}', target / name)
            self._patcher.rewrite_includes(dst, rules)
            self._log.debug('patched %s', dst, extra={'context': ctx})
            written.append(dst)
        return written

    def _sync_plain(self, grammar: GrammarDescriptor, target: Path) -> List[Path]:
        self._clear_vendored(target)
        return self._fetch_sources(grammar, 'src', target, [CANONICAL_PARSER_RULE])

    def _sync_variants(self, grammar: GrammarDescriptor, target: Path) -> List[Path]:
        if not grammar.shared_header:
            raise ValueError(f'grammar {grammar.name!r} declares variants without a shared header')

        # Fetched once, written into each variant so every directory builds on its own.
        shared = self._fetcher.fetch(grammar.repository, grammar.version, grammar.shared_header)

        written: List[Path] = []
        for variant in grammar.variants:
            vdir = target / variant
            self._clear_vendored(vdir)
            vdir.mkdir(parents=True, exist_ok=True)
            header = vdir / SHARED_HEADER_NAME
            header.write_bytes(shared)
            self._patcher.rewrite_includes(header, [CANONICAL_PARSER_RULE])
            written.append(header)
            written.extend(
                self._fetch_sources(grammar, f'{variant}/src', vdir, [SHARED_SCANNER_RULE, CANONICAL_PARSER_RULE])
            )
        return written

    def sync(self, grammar: GrammarDescriptor) -> List[Path]:
        """Fetch and patch every file of ``grammar``; return the written paths."""
        target = self.target_path(grammar)
        self._log.info('downloading %s %s', grammar.name, grammar.version)
        try:
            if grammar.has_variants:
                written = self._sync_variants(grammar, target)
            else:
                written = self._sync_plain(grammar, target)
        except Exception:
            self._log.error('⚠  %s %s: synchronization aborted', grammar.name, grammar.version,
                            extra={'context': {'grammar': grammar.name, 'version': grammar.version}})
            raise
        self._log.info('✔ %s %s → %s (%d files)', grammar.name, grammar.version, target, len(written))
        return written
