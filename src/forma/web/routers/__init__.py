"""Routers for the forma web interface."""
