from app.abstracts.model import ModelAbstract
from app.db.models import Vote


class VoteModel(ModelAbstract):
    table = Vote
