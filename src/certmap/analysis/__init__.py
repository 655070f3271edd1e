"""Filtering and grouping views over an assembled graph."""
