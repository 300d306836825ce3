"""Shared helpers used across exercism modules."""
