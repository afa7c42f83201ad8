import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from sittervendor.core.errors import PatchError
from sittervendor.core.models import RewriteRule
from sittervendor.logging.helpers import get_logger, trace_io

# Round-trips arbitrary bytes, vendored sources are not guaranteed to be UTF-8.
_ENCODING = 'utf-8'
_ERRORS = 'surrogateescape'


class TextPatcher:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        """Regex-driven, in-place rewriting of files already on disk."""
        self._log = logger or get_logger('processing.patcher')

    @staticmethod
    def compile_rules(rules: Sequence[RewriteRule]) -> List[Tuple[re.Pattern[str], RewriteRule]]:
        compiled: List[Tuple[re.Pattern[str], RewriteRule]] = []
        for rule in rules:
            try:
                compiled.append((re.compile(rule.pattern), rule))
            except re.error as exc:
                raise PatchError(Path('.'), f'invalid pattern {rule.pattern!r}: {exc}') from exc
        return compiled

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding=_ENCODING, errors=_ERRORS)
        except FileNotFoundError as exc:
            raise PatchError(path, 'file to patch does not exist') from exc

    def _write(self, path: Path, text: str) -> None:
        path.write_text(text, encoding=_ENCODING, errors=_ERRORS)

    def _apply(self, path: Path, compiled: Sequence[Tuple[re.Pattern[str], RewriteRule]]) -> List[int]:
        original = self._read(path)
        text = original
        counts: List[int] = []
        for rx, rule in compiled:
            # Replacement is literal text, never a regex template.
            text, n = rx.subn(lambda _m, _r=rule.replacement: _r, text)
            counts.append(n)
        if text != original:
            self._write(path, text)
        trace_io(self._log, 'rewrote includes', path=str(path), counts=counts)
        return counts

    def _check_expectations(self, where: Path, compiled, counts: Sequence[int]) -> None:
        for (_rx, rule), n in zip(compiled, counts):
            if n:
                continue
            label = rule.description or rule.pattern
            if rule.expect == 'required':
                raise PatchError(where, f'required rewrite {label!r} matched nothing')
            self._log.debug('rewrite %r matched nothing in %s', label, where)

    def rewrite_includes(self, path: Path, rules: Sequence[RewriteRule]) -> List[int]:
        """Apply ``rules`` in order to ``path`` and return the match count of each rule."""
        path = Path(path)
        compiled = self.compile_rules(rules)
        counts = self._apply(path, compiled)
        self._check_expectations(path, compiled, counts)
        return counts

    def rewrite_many(self, paths: Sequence[Path], rules: Sequence[RewriteRule]) -> List[int]:
        """Apply ``rules`` to every file; expectations hold for the combined counts."""
        compiled = self.compile_rules(rules)
        totals = [0] * len(compiled)
        for path in paths:
            for idx, n in enumerate(self._apply(Path(path), compiled)):
                totals[idx] += n
        where = Path(paths[0]).parent if paths else Path('.')
        self._check_expectations(where, compiled, totals)
        return totals

    def insert_include(self, path: Path, line: str) -> bool:
        """Prepend ``line`` to ``path`` unless it already is the first line.

        Returns True when the file was modified.
        """
        path = Path(path)
        text = self._read(path)
        first = text.split('\n', 1)[0].rstrip('\r')
        if first == line:
            self._log.debug('%s already starts with %s', path, line)
            return False
        self._write(path, f'{line}\n{text}')
        self._log.info('✔ inserted %s into %s', line, path.name)
        return True
