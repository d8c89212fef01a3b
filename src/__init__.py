"""Personal ledger dashboard."""
