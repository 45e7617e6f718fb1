"""
Yoga API service.

Token-based authentication and enrollment of users into scheduled yoga sessions.
"""

__version__ = "1.0.0"
