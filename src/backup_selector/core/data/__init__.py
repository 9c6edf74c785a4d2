"""Data sources for backup candidate discovery."""
