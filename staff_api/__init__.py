"""
Staff Directory API.
REST backend for areas, managers, departments and employees on MongoDB.
"""

__version__ = "1.0.0"
