from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from sittervendor.core.errors import GitCommandError
from sittervendor.logging.helpers import trace_io


def run_git(
    args: Sequence[str],
    *,
    cwd: Optional[Path] = None,
    logger: Optional[logging.Logger] = None,
    timeout: Optional[float] = None,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """Run ``git <args>`` capturing text output.

    Raises GitCommandError on a non-zero exit when ``check`` is set, and when
    the git binary cannot be started at all.
    """
    cmd: List[str] = ['git', *args]
    if logger is not None:
        trace_io(logger, 'exec', cmd=cmd, cwd=str(cwd) if cwd else None)
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        raise GitCommandError(cmd, -1, str(exc)) from exc
    if check and proc.returncode != 0:
        raise GitCommandError(cmd, proc.returncode, proc.stderr)
    return proc
