"""Typegen - entity model for generated RBI and RBS type definitions."""

try:
    from importlib.metadata import version

    __version__ = version("typegen")
except Exception:
    __version__ = "0.0.0.dev0+local"  # Fallback for development
