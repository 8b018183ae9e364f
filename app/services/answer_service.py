"""
Answer Service

Answers are always listed in the context of a question, so the question is
checked first and its id is pinned in the filter (question_id is not in the
filter allow-list and cannot be overridden from the query string).
"""

from typing import Any

from app.abstracts.service import ServiceAbstract


class AnswerService(ServiceAbstract):

    def get_allow_order_fields(self) -> list[str]:
        return ["vote_count", "created_at"]

    def get_allow_filter_fields(self) -> list[str]:
        return ["user_id"]

    async def get_list_by_question(self, question_id: int) -> dict[str, Any]:
        """
        Raises:
            NotFoundError: If the question does not exist
        """
        await self.resolve("question_service").get(question_id)
        return await self.get_list(
            default_filter={"question_id": question_id},
            default_order={"created_at": "DESC"},
        )
