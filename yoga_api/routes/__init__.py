"""
API route modules.
"""

from . import auth, sessions, teachers, users, monitoring

__all__ = ["auth", "sessions", "teachers", "users", "monitoring"]
