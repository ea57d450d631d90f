"""GoTrue user management operations."""
from __future__ import annotations
import logging
from typing import List

from .client import GoTrueClient
from .exceptions import UserNotFoundError

LIST_USERS_PER_PAGE = 100
EMAIL_SCAN_MAX_PAGES = 1000

logger = logging.getLogger(__name__)


class UserService:
    """Service for managing users through the GoTrue admin API."""

    def __init__(self, client: GoTrueClient):
        """Initialize user service.

        Args:
            client: Any object exposing ``list_users`` and ``update_user_by_id``
        """
        self.client = client

    def list_users(self, page: int = 1, per_page: int = LIST_USERS_PER_PAGE) -> List[dict]:
        """Return a single page of users."""
        users = self.client.list_users(page=page, per_page=per_page)
        logger.debug("Provider returned %d users for page %s", len(users), page)
        return users

    def update_password(self, user_id: str, new_password: str) -> dict:
        """Set a new password on the user and return the updated record."""
        return self.client.update_user_by_id(user_id, {"password": new_password})

    def find_user_by_email(self, email: str) -> dict:
        """Return the first user whose email exactly matches ``email``.

        The provider paginates its user list, so every page is scanned until
        a match, an empty page, or a page shorter than the page size. The
        comparison is case-sensitive.

        Args:
            email: Address to look for

        Returns:
            Matching user record

        Raises:
            UserNotFoundError: If no page contains the address
            GoTrueAPIError: If listing users fails
        """
        for page in range(1, EMAIL_SCAN_MAX_PAGES + 1):
            users = self.client.list_users(page=page, per_page=LIST_USERS_PER_PAGE)
            for user in users:
                if user.get("email") == email:
                    return user
            if len(users) < LIST_USERS_PER_PAGE:
                break
        else:
            logger.warning("Email scan stopped after %d pages", EMAIL_SCAN_MAX_PAGES)
        raise UserNotFoundError(email)

    def reset_password_by_email(self, email: str, new_password: str) -> dict:
        """Look the user up by email and set a new password.

        Args:
            email: Address of the target user
            new_password: Plaintext password forwarded to the provider

        Returns:
            Updated user record

        Raises:
            UserNotFoundError: If no user has that email
            GoTrueAPIError: If either provider call fails
        """
        user = self.find_user_by_email(email)
        return self.update_password(user["id"], new_password)
