"""Utility packages for Logipath."""
