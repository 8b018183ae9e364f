"""
Answer Model

Data access for the answers table.
"""

from app.abstracts.model import ModelAbstract
from app.db.models import Answer


class AnswerModel(ModelAbstract):
    table = Answer
