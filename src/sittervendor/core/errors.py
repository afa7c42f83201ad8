from __future__ import annotations

"""Exception hierarchy shared by every vendoring stage.

Any ``VendorError`` aborts the current run; the CLI maps it to exit code 1.
``VersionQueryError`` is the exception: the freshness checker records it per
item and keeps going.
"""

from pathlib import Path
from typing import Optional, Sequence


class VendorError(RuntimeError):
    """Base class for failures raised by sittervendor."""


class TransportError(VendorError):
    """A remote file or repository could not be retrieved."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f'could not fetch {url}: {reason}')
        self.url = url
        self.reason = reason


class PatchError(VendorError):
    """A file could not be patched the way the registry expects."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f'{path}: {message}')
        self.path = Path(path)


class VersionQueryError(VendorError):
    """Remote tags of a repository could not be listed."""

    def __init__(self, repository: str, reason: object) -> None:
        super().__init__(f'could not list tags of {repository}: {reason}')
        self.repository = repository
        self.reason = reason


class GitCommandError(VendorError):
    """A local git invocation exited with a non-zero status."""

    def __init__(self, cmd: Sequence[str], returncode: int, stderr: Optional[str] = None) -> None:
        detail = (stderr or '').strip()
        msg = f"{' '.join(cmd)} exited with {returncode}"
        if detail:
            msg = f'{msg}: {detail}'
        super().__init__(msg)
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
