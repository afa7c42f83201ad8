"""
sittervendor.sync – Engine and grammar synchronizers.
"""
from .engine import EngineSynchronizer
from .grammar import GrammarSynchronizer

__all__ = ["EngineSynchronizer", "GrammarSynchronizer"]
