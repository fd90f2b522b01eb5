"""Schema-driven form handling for the portal pages."""
