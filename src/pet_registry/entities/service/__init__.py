"""Service-level entities."""
