"""
FastAPI Endpoints for the Forum

Read-only list and detail endpoints. Endpoints only handle:
- Rate limiting
- Delegating to the service layer

Sorting, filtering and paging come from the query string and are parsed by
the services against their allow-lists:
    GET /questions?order=-vote_count&user_id=3&page=2&per_page=20

Errors raised by services (NotFoundError, DependencyNotFoundError,
DatabaseError) are mapped to HTTP responses by the handlers in app.main.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request

from app.api.deps import get_service
from app.api.schemas import ErrorResponse, PageResponse
from app.core.rate_limit import limiter, RATE_LIMITS
from app.services.answer_service import AnswerService
from app.services.comment_service import CommentService
from app.services.question_service import QuestionService
from app.services.user_service import UserService
from app.services.vote_service import VoteService

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("/users", response_model=PageResponse, tags=["Users"], summary="List users")
@limiter.limit(RATE_LIMITS["list"])
async def list_users(
    request: Request,  # Required for rate limiting (slowapi expects parameter named 'request')
    service: UserService = Depends(get_service(UserService))
) -> dict[str, Any]:
    return await service.get_users()


@router.get("/users/{user_id}", tags=["Users"], summary="Get a user", responses=NOT_FOUND)
@limiter.limit(RATE_LIMITS["detail"])
async def get_user(
    user_id: int,
    request: Request,
    service: UserService = Depends(get_service(UserService))
) -> dict[str, Any]:
    return await service.get(user_id)


@router.get(
    "/users/by-name/{username}",
    tags=["Users"],
    summary="Get a user by username",
    responses=NOT_FOUND
)
@limiter.limit(RATE_LIMITS["detail"])
async def get_user_by_username(
    username: str,
    request: Request,
    service: UserService = Depends(get_service(UserService))
) -> dict[str, Any]:
    return await service.get_by_username(username)


@router.get("/questions", response_model=PageResponse, tags=["Questions"], summary="List questions")
@limiter.limit(RATE_LIMITS["list"])
async def list_questions(
    request: Request,
    service: QuestionService = Depends(get_service(QuestionService))
) -> dict[str, Any]:
    return await service.get_questions()


@router.get(
    "/questions/{question_id}",
    tags=["Questions"],
    summary="Get a question",
    responses=NOT_FOUND
)
@limiter.limit(RATE_LIMITS["detail"])
async def get_question(
    question_id: int,
    request: Request,
    service: QuestionService = Depends(get_service(QuestionService))
) -> dict[str, Any]:
    return await service.get(question_id)


@router.get(
    "/questions/{question_id}/answers",
    response_model=PageResponse,
    tags=["Answers"],
    summary="List the answers to a question",
    responses=NOT_FOUND
)
@limiter.limit(RATE_LIMITS["list"])
async def list_answers(
    question_id: int,
    request: Request,
    service: AnswerService = Depends(get_service(AnswerService))
) -> dict[str, Any]:
    return await service.get_list_by_question(question_id)


@router.get("/comments", response_model=PageResponse, tags=["Comments"], summary="List comments")
@limiter.limit(RATE_LIMITS["list"])
async def list_comments(
    request: Request,
    service: CommentService = Depends(get_service(CommentService))
) -> dict[str, Any]:
    return await service.get_comments()


@router.get("/votes", response_model=PageResponse, tags=["Votes"], summary="List votes")
@limiter.limit(RATE_LIMITS["list"])
async def list_votes(
    request: Request,
    service: VoteService = Depends(get_service(VoteService))
) -> dict[str, Any]:
    return await service.get_votes()
