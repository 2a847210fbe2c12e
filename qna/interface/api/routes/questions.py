"""Question routes: listing, detail, answers."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from qna.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from qna.application.usecase.auth import GetCurrentUserUseCase
from qna.application.usecase.common import MessageResponse
from qna.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    PopularTagsResponse,
    PopularTagsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionResponse,
    UpdateQuestionUseCase,
)
from qna.interface.api.dependencies import optional_user, require_user

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=10, max_length=200)
    description: str = Field(min_length=20, max_length=10000)
    tags: list[str] = Field(min_length=1, max_length=10)


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question. All fields optional."""

    title: str | None = Field(default=None, min_length=10, max_length=200)
    description: str | None = Field(default=None, min_length=20, max_length=10000)
    tags: list[str] | None = Field(default=None, min_length=1, max_length=10)


class AnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str = Field(min_length=20, max_length=10000)


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    search: str | None = Query(default=None),
    tags: str | None = Query(default=None),
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_order: str | None = Query(default=None, alias="sortOrder"),
    filter: str | None = Query(default=None),
) -> ListQuestionsResponse:
    """List questions. Public.

    Query parameters are validated together by the use case request so
    every bad value is reported as 400.
    """
    options = {
        "page": page,
        "limit": limit,
        "search": search,
        "tags": tags,
        "sort_by": sort_by,
        "sort_order": sort_order,
        "filter": filter,
    }
    request = ListQuestionsRequest(**{k: v for k, v in options.items() if v is not None})
    return await list_questions_use_case.execute(request)


@router.get("/tags/popular", response_model=PopularTagsResponse)
async def popular_tags(
    popular_tags_use_case: FromDishka[PopularTagsUseCase],
) -> PopularTagsResponse:
    """Top 20 tags by number of questions. Public."""
    return await popular_tags_use_case.execute()


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CreateQuestionResponse:
    """Ask a question. Requires authentication."""
    user = await require_user(authorization, get_current_user_use_case)
    return await create_question_use_case.execute(
        CreateQuestionRequest(
            title=request.title,
            description=request.description,
            tags=request.tags,
            author_id=user.user_id,
        )
    )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetQuestionResponse:
    """Question detail with ranked answers and comments. Public.

    When authenticated, each answer carries the caller's vote.
    """
    user = await optional_user(authorization, get_current_user_use_case)
    return await get_question_use_case.execute(
        GetQuestionRequest(
            question_id=str(question_id), user_id=user.user_id if user else None
        )
    )


@router.put("/{question_id}", response_model=UpdateQuestionResponse)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UpdateQuestionResponse:
    """Edit a question. Author or admin only."""
    user = await require_user(authorization, get_current_user_use_case)
    return await update_question_use_case.execute(
        UpdateQuestionRequest(
            question_id=str(question_id),
            user_id=user.user_id,
            role=user.role,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
    )


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Delete a question with its answers, votes and comments. Author or admin only."""
    user = await require_user(authorization, get_current_user_use_case)
    return await delete_question_use_case.execute(
        DeleteQuestionRequest(
            question_id=str(question_id), user_id=user.user_id, role=user.role
        )
    )


@router.get("/{question_id}/answers", response_model=ListAnswersResponse)
async def list_answers(
    question_id: UUID,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ListAnswersResponse:
    """Answers to a question in display order. Public."""
    user = await optional_user(authorization, get_current_user_use_case)
    return await list_answers_use_case.execute(
        ListAnswersRequest(
            question_id=str(question_id), user_id=user.user_id if user else None
        )
    )


@router.post(
    "/{question_id}/answers",
    response_model=CreateAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    request: AnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CreateAnswerResponse:
    """Answer a question. One answer per user per question."""
    user = await require_user(authorization, get_current_user_use_case)
    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            question_id=str(question_id),
            content=request.content,
            author_id=user.user_id,
        )
    )
