"""Sync metadata store: devices, content versions and per-device sync status."""
