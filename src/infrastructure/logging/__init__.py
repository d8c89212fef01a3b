"""Logging helpers for the ledger application."""
