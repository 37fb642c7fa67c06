"""Utility helpers for forma."""
