"""Interface adapters (UI/HTTP/CLI)."""

__all__ = []
