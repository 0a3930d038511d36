"""Reference tables used for reporting."""
