"""Eviction-policy engines."""
