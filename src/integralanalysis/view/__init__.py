"""Matplotlib rendering of engine results."""
