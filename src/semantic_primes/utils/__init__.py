"""Text and statistics helpers."""
