from typing import List

from fastapi import APIRouter

from hsc_grammar.api.schemas.topic import TopicSchema
from hsc_grammar.core.configs.topics import list_topics

router = APIRouter()


@router.get(
    '/',
    response_model=List[TopicSchema],
    summary='List grammar topics',
)
async def get_topics() -> List[TopicSchema]:
    return [
        TopicSchema(
            topic_id=topic.topic_id.value,
            name=topic.name,
            short_name=topic.short_name,
            description=topic.description,
            allow_passage_mode=topic.allow_passage_mode,
            supports_deterministic_grading=(
                topic.supports_deterministic_grading
            ),
        )
        for topic in list_topics()
    ]
