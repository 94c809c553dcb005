"""Utility helpers for the layered configuration resolver."""

from .logging import setup_logging

__all__ = ["setup_logging"]
