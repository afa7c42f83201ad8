from dataclasses import dataclass, field
from typing import Literal, Mapping, Optional, Tuple

# How many matches a rewrite rule must produce across the files it touches.
RuleExpectation = Literal['optional', 'required']


@dataclass(frozen=True)
class GrammarDescriptor:
    """One pinned grammar: upstream name, release tag and vendored file set.

    ``variants`` lists sub-grammars living in the same upstream repository
    (e.g. typescript and tsx) that share ``shared_header``.
    """
    name: str
    version: str
    files: Tuple[str, ...] = ()
    variants: Tuple[str, ...] = ()
    shared_header: Optional[str] = None

    @property
    def repository(self) -> str:
        return f'tree-sitter-{self.name}'

    @property
    def has_variants(self) -> bool:
        return bool(self.variants)


@dataclass(frozen=True)
class IncludeFix:
    """Prepend ``line`` to ``relpath`` (relative to the engine checkout)."""
    relpath: str
    line: str


@dataclass(frozen=True)
class RewriteRule:
    pattern: str
    replacement: str
    expect: RuleExpectation = 'optional'
    description: str = ''


@dataclass(frozen=True)
class FetchRequest:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class FetchResponse:
    status: int
    headers: Mapping[str, str]
    body: bytes
    final_url: str


@dataclass(frozen=True)
class FreshnessEntry:
    name: str
    vendored: str
    remote_latest: Optional[str]
    outdated: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class TagResult:
    name: str
    created: bool
