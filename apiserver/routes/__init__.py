"""API routes."""

from .users import create_user, get_user, list_users

__all__ = ["create_user", "get_user", "list_users"]
