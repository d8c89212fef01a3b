"""Interface adapters (presentation layers)."""

__all__: list[str] = []
