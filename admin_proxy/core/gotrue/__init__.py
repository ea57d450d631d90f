"""GoTrue admin API client library.

Architecture:
- client.py: HTTP client with service-key authentication and error extraction
- users.py: User operations (list, password update, lookup by email)
- exceptions.py: Typed exceptions for error handling

Usage:
    from admin_proxy.core.gotrue import GoTrueClient, UserService

    client = GoTrueClient("https://project.supabase.co", service_role_key)
    user_service = UserService(client)
    user = user_service.reset_password_by_email("alice@example.com", "n3w-Secret!")
"""
from .client import (
    GoTrueClient,
    REQUEST_TIMEOUT,
    ADMIN_USERS_PATH,
)
from .exceptions import (
    GoTrueError,
    GoTrueAPIError,
    UserNotFoundError,
)
from .users import (
    UserService,
    LIST_USERS_PER_PAGE,
)

__all__ = [
    # Client
    "GoTrueClient",
    "REQUEST_TIMEOUT",
    "ADMIN_USERS_PATH",

    # Exceptions
    "GoTrueError",
    "GoTrueAPIError",
    "UserNotFoundError",

    # Services
    "UserService",
    "LIST_USERS_PER_PAGE",
]
