"""
Question Model

Data access for the questions table.
"""

from app.abstracts.model import ModelAbstract
from app.db.models import Question


class QuestionModel(ModelAbstract):
    table = Question
