"""Adapters wiring use cases to CLIs and user interfaces."""
