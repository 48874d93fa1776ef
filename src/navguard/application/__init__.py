"""
Application layer for navguard.

Host-facing helpers built on the domain and guards: chains of guards and
the adapter that plugs a guard into a routing layer.
"""

from navguard.application.adapter import resolve_redirect_path, to_redirect
from navguard.application.chain import GuardChain

__all__ = [
    "GuardChain",
    "resolve_redirect_path",
    "to_redirect",
]
