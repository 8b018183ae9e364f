"""
Question Service

Lists and fetches questions.
"""

from typing import Any

from app.abstracts.service import ServiceAbstract


class QuestionService(ServiceAbstract):

    def get_allow_order_fields(self) -> list[str]:
        return ["vote_count", "answer_count", "created_at", "updated_at"]

    def get_allow_filter_fields(self) -> list[str]:
        return ["user_id"]

    async def get_questions(self) -> dict[str, Any]:
        return await self.get_list(default_order={"created_at": "DESC"})
