"""Shared helpers for the sync metadata store."""
