from __future__ import annotations

from sittervendor.cli import SitterVendor
from sittervendor.core.errors import (
    GitCommandError,
    PatchError,
    TransportError,
    VendorError,
    VersionQueryError,
)
from sittervendor.core.models import FreshnessEntry, GrammarDescriptor, TagResult
from sittervendor.publishing.tags import TagPublisher
from sittervendor.registry import DEFAULT_REGISTRY, ENGINE_VERSION, GRAMMARS, Registry
from sittervendor.runtime.container import VendorBuilder, VendorConfig
from sittervendor.runtime.runner import VendorRunner
from sittervendor.sync.engine import EngineSynchronizer
from sittervendor.sync.grammar import GrammarSynchronizer
from sittervendor.versions.freshness import FreshnessChecker, latest_release

__version__ = '1.0.0'

__all__ = [
    'SitterVendor',
    'VendorBuilder',
    'VendorConfig',
    'VendorRunner',
    'Registry',
    'DEFAULT_REGISTRY',
    'ENGINE_VERSION',
    'GRAMMARS',
    'GrammarDescriptor',
    'FreshnessEntry',
    'TagResult',
    'EngineSynchronizer',
    'GrammarSynchronizer',
    'FreshnessChecker',
    'latest_release',
    'TagPublisher',
    'VendorError',
    'TransportError',
    'PatchError',
    'VersionQueryError',
    'GitCommandError',
]
