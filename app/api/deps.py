"""
FastAPI Dependencies

get_container opens a request-scoped child of the root container holding the
request adapter and the database session. Services and models resolved from
it are constructed for this request only.
"""

from typing import Type, TypeVar

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.abstracts.service import ServiceAbstract
from app.core.container import REQUEST_KEY, SESSION_KEY, Container, service_key
from app.core.request import QueryRequest
from app.db.session import get_session

ServiceType = TypeVar("ServiceType", bound=ServiceAbstract)


async def get_container(
    request: Request,
    session: AsyncSession = Depends(get_session)
) -> Container:
    container: Container = request.app.state.container.scope()
    container.set(REQUEST_KEY, QueryRequest(request))
    container.set(SESSION_KEY, session)
    return container


def get_service(service_class: Type[ServiceType]):
    """
    Dependency factory returning the request's instance of service_class.

    Usage:
        service: QuestionService = Depends(get_service(QuestionService))
    """
    async def _resolve(container: Container = Depends(get_container)) -> ServiceType:
        return container.get(service_key(service_class.__name__))
    return _resolve
