"""
Base classes for the forum service and model layers.
"""

from app.abstracts.model import ModelAbstract
from app.abstracts.service import ServiceAbstract

__all__ = [
    "ModelAbstract",
    "ServiceAbstract",
]
