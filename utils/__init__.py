"""Utility helpers for logging context and retries."""
