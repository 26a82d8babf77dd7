"""Shared helpers for partial-update schemas."""
from __future__ import annotations


def reject_null(value: object, label: str) -> object:
    """Refuse an explicit null for a column that cannot be empty."""
    if value is None:
        raise ValueError(f"{label} cannot be empty")
    return value
