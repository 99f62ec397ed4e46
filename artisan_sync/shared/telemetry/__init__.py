"""Shared telemetry: logging setup."""

from artisan_sync.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
