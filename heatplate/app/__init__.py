"""Application adapters (CLI)."""
