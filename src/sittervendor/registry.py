from __future__ import annotations

"""Pinned versions of the parsing engine and every vendored grammar.

Bumping a version here and re-running ``sittervendor download`` is the only
supported way to move a pin.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from sittervendor.core.models import GrammarDescriptor, IncludeFix

ENGINE_VERSION: str = '0.16.1'

GRAMMARS: Tuple[GrammarDescriptor, ...] = (
    GrammarDescriptor('bash', 'v0.16.0', ('parser.c', 'scanner.cc')),
    GrammarDescriptor('c-sharp', 'v0.16.0', ('parser.c', 'scanner.c')),
    GrammarDescriptor('c', 'v0.15.3', ('parser.c',)),
    GrammarDescriptor('cpp', 'v0.15.1', ('parser.c', 'scanner.cc')),
    GrammarDescriptor('go', 'v0.16.0', ('parser.c',)),
    GrammarDescriptor('java', 'v0.16.0', ('parser.c',)),
    GrammarDescriptor('javascript', 'v0.16.0', ('parser.c', 'scanner.c')),
    GrammarDescriptor('php', 'v0.13.1', ('parser.c', 'scanner.cc')),
    GrammarDescriptor('python', 'v0.16.0', ('parser.c', 'scanner.cc')),
    GrammarDescriptor('ruby', 'v0.16.1', ('parser.c', 'scanner.cc')),
    GrammarDescriptor('rust', 'v0.16.0', ('parser.c', 'scanner.c')),
    GrammarDescriptor(
        'typescript',
        'v0.16.0',
        ('parser.c', 'scanner.c'),
        variants=('typescript', 'tsx'),
        shared_header='common/scanner.h',
    ),
)

# Grammar names that are reserved words of the consuming Go module.
RESERVED_DIR_NAMES: Mapping[str, str] = MappingProxyType({
    'go': 'golang',
    'c-sharp': 'csharp',
})

# Engine releases that ship sources missing an include.
COMPATIBILITY_FIXES: Mapping[str, Tuple[IncludeFix, ...]] = MappingProxyType({
    '0.16.1': (IncludeFix('lib/src/query.c', '#include "language.h"'),),
})


class Registry:
    """Immutable view over the pinned engine and grammar set."""

    def __init__(
        self,
        grammars: Tuple[GrammarDescriptor, ...] = GRAMMARS,
        *,
        engine_version: str = ENGINE_VERSION,
        reserved: Optional[Mapping[str, str]] = None,
        fixes: Optional[Mapping[str, Tuple[IncludeFix, ...]]] = None,
    ) -> None:
        self._grammars = tuple(grammars)
        self._engine_version = engine_version
        self._reserved = dict(RESERVED_DIR_NAMES if reserved is None else reserved)
        self._fixes = dict(COMPATIBILITY_FIXES if fixes is None else fixes)

        names = [g.name for g in self._grammars]
        if len(names) != len(set(names)):
            raise ValueError(f'duplicate grammar names in registry: {names}')

    def list_grammars(self) -> Tuple[GrammarDescriptor, ...]:
        return self._grammars

    def engine_version(self) -> str:
        return self._engine_version

    def get(self, name: str) -> GrammarDescriptor:
        for grammar in self._grammars:
            if grammar.name == name:
                return grammar
        raise KeyError(name)

    def target_dir(self, name: str) -> str:
        """Directory name a grammar is vendored under."""
        return self._reserved.get(name, name)

    def compatibility_fixes(self, version: str) -> Tuple[IncludeFix, ...]:
        return self._fixes.get(version, ())


DEFAULT_REGISTRY = Registry()
