"""Compliance calendar use cases."""
