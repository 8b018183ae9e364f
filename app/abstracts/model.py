"""
Model Base Class

Data-access counterpart of a service. A model wraps one SQLModel table and
applies the order and filter specs built by the service layer.

Design Decisions:
- The async session is read from the request-scoped container, so a model
  lives exactly as long as the request that created it
- Filter values are matched by equality; fields that are not columns of the
  table are ignored rather than rejected
"""

import logging
from typing import Any, ClassVar, Mapping, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select
from sqlmodel import SQLModel

from app.core.container import SESSION_KEY, Container
from app.core.exceptions import DatabaseError
from app.core.validators import DESC

logger = logging.getLogger(__name__)

# Signed 64-bit range accepted by SQL INTEGER / BIGINT columns
MIN_SQL_INT = -(2 ** 63)
MAX_SQL_INT = 2 ** 63 - 1


def _coerce(column: Any, value: Any) -> Any:
    """Convert query string digits for integer columns; strict drivers reject '1' for INTEGER."""
    if not isinstance(value, str):
        return value
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return value
    if python_type is int:
        try:
            number = int(value)
        except ValueError:
            return value
        # Out-of-range digits stay a string and simply match no row
        if MIN_SQL_INT <= number <= MAX_SQL_INT:
            return number
    return value


class ModelAbstract:
    """
    Base class for all forum models.

    Subclasses set `table` to the SQLModel class they manage.
    """

    table: ClassVar[type[SQLModel]]

    def __init__(self, container: Container):
        self.container = container
        self.session: AsyncSession = container.get(SESSION_KEY)

    @classmethod
    def entity_name(cls) -> str:
        return cls.table.__name__

    def _column(self, field: str) -> Optional[Any]:
        return self.table.__table__.columns.get(field)

    def _apply_where(self, statement: Select, where: Mapping[str, Any]) -> Select:
        for field, value in where.items():
            column = self._column(field)
            if column is None:
                logger.debug(f"{self.entity_name()}: ignoring unknown filter field '{field}'")
                continue
            statement = statement.where(column == _coerce(column, value))
        return statement

    def _apply_order(self, statement: Select, order: Mapping[str, str]) -> Select:
        for field, direction in order.items():
            column = self._column(field)
            if column is None:
                logger.debug(f"{self.entity_name()}: ignoring unknown order field '{field}'")
                continue
            statement = statement.order_by(column.desc() if direction == DESC else column.asc())
        return statement

    async def get(self, record_id: int) -> Optional[SQLModel]:
        try:
            return await self.session.get(self.table, record_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load {self.entity_name()} {record_id}: {e}", exc_info=True)
            raise DatabaseError(f"Failed to load {self.entity_name()}: {e}", original_error=e)

    async def select(
        self,
        where: Optional[Mapping[str, Any]] = None,
        order: Optional[Mapping[str, str]] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Sequence[SQLModel]:
        """
        Records matching where, sorted by order.

        Args:
            where: Field -> value equality conditions
            order: Field -> "ASC" | "DESC", applied in mapping order
            limit: Maximum number of records, None for all
            offset: Number of records to skip
        """
        statement = self._apply_where(select(self.table), where or {})
        statement = self._apply_order(statement, order or {})
        if limit is not None:
            statement = statement.limit(limit)
        if offset:
            statement = statement.offset(offset)

        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list {self.entity_name()}: {e}", exc_info=True)
            raise DatabaseError(f"Failed to list {self.entity_name()}: {e}", original_error=e)
        return result.scalars().all()

    async def count(self, where: Optional[Mapping[str, Any]] = None) -> int:
        statement = self._apply_where(select(func.count()).select_from(self.table), where or {})
        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            logger.error(f"Failed to count {self.entity_name()}: {e}", exc_info=True)
            raise DatabaseError(f"Failed to count {self.entity_name()}: {e}", original_error=e)
        return result.scalar() or 0
