"""Popular tags use case."""

from qna.application.usecase.base import ApiModel
from qna.domain.service import QuestionService

POPULAR_TAGS_LIMIT = 20


class TagCount(ApiModel):
    """Tag usage."""

    tag: str
    count: int


class PopularTagsResponse(ApiModel):
    """Popular tags response."""

    popular_tags: list[TagCount]


class PopularTagsUseCase:
    """Use case for the most used question tags."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self) -> PopularTagsResponse:
        tags = await self.question_service.popular_tags(POPULAR_TAGS_LIMIT)
        return PopularTagsResponse(
            popular_tags=[TagCount(tag=tag, count=count) for tag, count in tags]
        )
