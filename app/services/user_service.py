"""
User Service

Lists and fetches forum members. Email addresses never leave the service.
"""

from typing import Any

from app.abstracts.service import ServiceAbstract
from app.core.exceptions import NotFoundError


class UserService(ServiceAbstract):
    """Service for reading users."""

    def get_privacy_fields(self) -> list[str]:
        return ["email"]

    def get_allow_order_fields(self) -> list[str]:
        return ["id", "username", "follower_count", "created_at"]

    def get_allow_filter_fields(self) -> list[str]:
        return ["username"]

    async def get_users(self) -> dict[str, Any]:
        return await self.get_list(default_order={"id": "ASC"})

    async def get_by_username(self, username: str) -> dict[str, Any]:
        """
        Fetch a user by username.

        Raises:
            NotFoundError: If no user has this username
        """
        user = await self.resolve("user_model").get_by_username(username)
        if user is None:
            raise NotFoundError("User", username)
        return self.hide_privacy_fields(user)
