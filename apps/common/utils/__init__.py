"""Shared helpers for the roster apps."""

from .time_utils import ensure_aware


__all__ = ["ensure_aware"]
