from __future__ import annotations
"""Text patcher protocol definitions."""

from pathlib import Path
from typing import List, Protocol, Sequence

from sittervendor.core.models import RewriteRule


class TextPatcherProtocol(Protocol):
    """Protocol for in-place source patching.

    Implementations are expected to:
      * Apply an ordered list of rewrite rules to files on disk.
      * Prepend a missing include line to a single file.

    Methods:
        rewrite_includes: Apply `rules` to one file, return per-rule match counts.
        rewrite_many: Apply `rules` to several files, counting matches across all.
        insert_include: Prepend `line` unless it is already the first line.
    """

    def rewrite_includes(self, path: Path, rules: Sequence[RewriteRule]) -> List[int]:
        ...

    def rewrite_many(self, paths: Sequence[Path], rules: Sequence[RewriteRule]) -> List[int]:
        ...

    def insert_include(self, path: Path, line: str) -> bool:
        ...
