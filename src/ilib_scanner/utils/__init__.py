"""Shared helpers (console and logging)."""
