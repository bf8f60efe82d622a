"""GitHub CLI (gh) presence gateway."""
