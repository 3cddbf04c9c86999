# registry/__init__.py
# ------------------------------------------------------------------------------
# Registry package init
# Exposes the in-memory PatternRegistry and the process-wide default instance.
# ------------------------------------------------------------------------------

from .pattern_registry import PatternRegistry, RegistryError, get_registry

__all__ = ["PatternRegistry", "RegistryError", "get_registry"]
