"""Common constants shared across usersapi modules."""

PLACEHOLDER_EMAIL = "test@example.com"
USERNAME_PREFIX = "username_"

SAMPLE_USERS = [
    {"username": "test_user1", "email": "example1@example.com"},
    {"username": "test_user2", "email": "example2@example.com"},
]

USER_ID_PARAM = "user_id"
MAX_USER_ID = 2**64 - 1
