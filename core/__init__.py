"""Core domain models and data sources for the users API."""

from .datasource import InvalidUserId, SampleUserSource, UserSource, parse_user_id
from .models import User

__all__ = ["InvalidUserId", "SampleUserSource", "User", "UserSource", "parse_user_id"]
