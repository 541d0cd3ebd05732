"""User persistence adapters."""
