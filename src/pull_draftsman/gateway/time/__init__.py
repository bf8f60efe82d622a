"""Time gateway."""
