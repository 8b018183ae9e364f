from app.abstracts.model import ModelAbstract
from app.db.models import Comment


class CommentModel(ModelAbstract):
    table = Comment
