"""
Maintenance scripts.
"""
