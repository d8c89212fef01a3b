"""Streamlit presentation adapter."""

__all__: list[str] = []
