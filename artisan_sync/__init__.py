"""Bulk import/export of artisan and review datasets to Cloud Firestore."""

__version__ = "1.0.0"
