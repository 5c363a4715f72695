"""Utility helpers shared across formcheck modules."""
