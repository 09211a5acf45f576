"""Utility modules for cli2md."""
