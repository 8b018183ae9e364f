from typing import Any

from app.abstracts.service import ServiceAbstract


class CommentService(ServiceAbstract):
    """Comments on questions and answers."""

    def get_allow_order_fields(self) -> list[str]:
        return ["created_at"]

    def get_allow_filter_fields(self) -> list[str]:
        return ["user_id", "commentable_type", "commentable_id"]

    async def get_comments(self) -> dict[str, Any]:
        return await self.get_list(default_order={"created_at": "DESC"})
