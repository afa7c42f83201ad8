from __future__ import annotations

"""Public surface for sittervendor.core.

Stable import location for the protocols, value types and errors shared by
the synchronizers:

    from sittervendor.core import GrammarDescriptor, TransportError, ...
"""

from sittervendor.core.errors import (
    GitCommandError,
    PatchError,
    TransportError,
    VendorError,
    VersionQueryError,
)
from sittervendor.core.interfaces import (
    GitRemoteProtocol,
    HTTPTransportProtocol,
    LocalRepositoryProtocol,
    RawFetcherProtocol,
    TextPatcherProtocol,
)
from sittervendor.core.models import (
    FetchRequest,
    FetchResponse,
    FreshnessEntry,
    GrammarDescriptor,
    IncludeFix,
    RewriteRule,
    TagResult,
)

__all__ = [
    # Protocols
    "GitRemoteProtocol",
    "HTTPTransportProtocol",
    "LocalRepositoryProtocol",
    "RawFetcherProtocol",
    "TextPatcherProtocol",
    # Models
    "FetchRequest",
    "FetchResponse",
    "FreshnessEntry",
    "GrammarDescriptor",
    "IncludeFix",
    "RewriteRule",
    "TagResult",
    # Errors
    "GitCommandError",
    "PatchError",
    "TransportError",
    "VendorError",
    "VersionQueryError",
]
