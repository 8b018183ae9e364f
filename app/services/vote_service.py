from typing import Any

from app.abstracts.service import ServiceAbstract
from app.models.vote_model import VoteModel


class VoteService(ServiceAbstract):
    """Votes on questions and answers."""

    model_class = VoteModel

    def get_allow_order_fields(self) -> list[str]:
        return ["created_at"]

    def get_allow_filter_fields(self) -> list[str]:
        return ["user_id", "votable_type", "votable_id", "type"]

    async def get_votes(self) -> dict[str, Any]:
        return await self.get_list(default_order={"created_at": "DESC"})
