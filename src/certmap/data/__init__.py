"""Bundled certification catalog."""
