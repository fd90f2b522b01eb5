"""Service layer for the portal."""
