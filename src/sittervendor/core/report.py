from __future__ import annotations

"""
Run reports for the vendoring verbs.

- SyncReport: files written per item and time spent per stage of a download.
- render_freshness: the check-updates table (text or JSON).
"""

import json
import time
from dataclasses import asdict, dataclass, field
from typing import Dict, Iterable, Sequence

from sittervendor.core.models import FreshnessEntry, TagResult


@dataclass
class SyncReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    files_by_item: Dict[str, int] = field(default_factory=dict)
    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {"engine": 0.0, "grammars": 0.0}
    )

    @property
    def files_total(self) -> int:
        return sum(self.files_by_item.values())

    def add_files(self, item: str, count: int) -> None:
        self.files_by_item[item] = self.files_by_item.get(item, 0) + count

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "duration_s": self.duration_s,
                "files_total": self.files_total,
                "files_by_item": self.files_by_item,
                "time_by_stage": self.time_by_stage,
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: SyncReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False


def _freshness_line(entry: FreshnessEntry) -> str:
    # Two tabs after the name keep short names aligned with "tree-sitter".
    if entry.error:
        return f"{entry.name}\t\tvendored: {entry.vendored}\tremote: ?\terror: {entry.error}"
    status = "outdated" if entry.outdated else ""
    return f"{entry.name}\t\tvendored: {entry.vendored}\tremote: {entry.remote_latest or ''}\t{status}".rstrip()


def render_freshness(entries: Sequence[FreshnessEntry], *, fmt: str = "text") -> str:
    if fmt == "json":
        return json.dumps([asdict(e) for e in entries], indent=2)
    return "\n".join(_freshness_line(e) for e in entries)


def render_tags(results: Iterable[TagResult], *, fmt: str = "text") -> str:
    if fmt == "json":
        return json.dumps([asdict(r) for r in results], indent=2)
    return "\n".join(
        f"{r.name}\t{'created' if r.created else 'exists'}" for r in results
    )
