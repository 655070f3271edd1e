"""Command line interface for certmap."""
