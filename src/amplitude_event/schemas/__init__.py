"""Event record and known-field table models."""
