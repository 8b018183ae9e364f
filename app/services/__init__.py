"""
Services module for business logic separation.

Each service is registered in the container under "app.services.<ClassName>"
as a factory; it is constructed once per request container on first use.
"""

from app.core.container import Container, service_key
from app.services.answer_service import AnswerService
from app.services.comment_service import CommentService
from app.services.question_service import QuestionService
from app.services.user_service import UserService
from app.services.vote_service import VoteService

SERVICES = (
    AnswerService,
    CommentService,
    QuestionService,
    UserService,
    VoteService,
)


def register_services(container: Container) -> None:
    for service_class in SERVICES:
        container.register(service_key(service_class.__name__), service_class)


__all__ = [
    "AnswerService",
    "CommentService",
    "QuestionService",
    "UserService",
    "VoteService",
    "register_services",
]
