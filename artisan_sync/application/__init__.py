"""Application layer: dataset loading and sync operations."""
