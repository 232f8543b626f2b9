"""Helpers built on the hex codec."""
