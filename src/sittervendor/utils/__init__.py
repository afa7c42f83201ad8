"""
sittervendor.utils – Small shared utilities (TLS context, user agent).
"""
from .net import DEFAULT_UA, ssl_context_for

__all__ = ["DEFAULT_UA", "ssl_context_for"]
