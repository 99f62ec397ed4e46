"""Shared utilities: telemetry and cross-cutting helpers. No sync logic."""
