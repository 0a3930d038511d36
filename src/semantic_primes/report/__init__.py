"""Rendering of discovery results."""
