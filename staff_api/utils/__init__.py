"""
Utility helpers: logging setup, request dependencies, referential checks.
"""
