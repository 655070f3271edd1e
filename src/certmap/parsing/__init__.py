"""Loading and validation of raw catalog imports."""
