"""Packaged text resources used by the resource-reading tests."""
