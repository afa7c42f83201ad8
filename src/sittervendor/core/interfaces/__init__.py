from .git import GitRemoteProtocol, LocalRepositoryProtocol
from .net import HTTPTransportProtocol, RawFetcherProtocol
from .text import TextPatcherProtocol

__all__ = [
    'GitRemoteProtocol',
    'LocalRepositoryProtocol',
    'HTTPTransportProtocol',
    'RawFetcherProtocol',
    'TextPatcherProtocol',
]
