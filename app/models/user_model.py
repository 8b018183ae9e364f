"""
User Model

Data access for the users table.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.abstracts.model import ModelAbstract
from app.core.exceptions import DatabaseError
from app.db.models import User

logger = logging.getLogger(__name__)


class UserModel(ModelAbstract):
    table = User

    async def get_by_username(self, username: str) -> Optional[User]:
        statement = select(User).where(User.__table__.c.username == username)
        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load user '{username}': {e}", exc_info=True)
            raise DatabaseError(f"Failed to load user: {e}", original_error=e)
        return result.scalar_one_or_none()
