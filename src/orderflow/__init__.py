"""
orderflow - Order processing through pluggable capabilities

Public API for wiring an order manager from interchangeable order,
invoice and notification collaborators.
"""

from importlib.metadata import version

try:
    __version__ = version("orderflow")
except Exception:
    __version__ = "0.0.0.dev"  # Fallback for development


__all__ = [
    "__version__",
]
