"""API package - HTTP routes, middleware and dependencies."""
