"""
Data-access models.

Each model is registered in the container under "app.models.<ClassName>",
which is where ServiceAbstract looks for a service's companion model.
"""

from app.core.container import Container, model_key
from app.models.answer_model import AnswerModel
from app.models.comment_model import CommentModel
from app.models.question_model import QuestionModel
from app.models.user_model import UserModel
from app.models.vote_model import VoteModel

MODELS = (
    AnswerModel,
    CommentModel,
    QuestionModel,
    UserModel,
    VoteModel,
)


def register_models(container: Container) -> None:
    for model_class in MODELS:
        container.register(model_key(model_class.__name__), model_class)


__all__ = [
    "AnswerModel",
    "CommentModel",
    "QuestionModel",
    "UserModel",
    "VoteModel",
    "register_models",
]
