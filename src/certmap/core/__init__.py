"""Core types and errors shared by every certmap layer."""
