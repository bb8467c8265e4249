"""Utility helpers (text matching, resources, hashing)."""
