from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from hsc_grammar.core.enums import TopicId


class TopicDef(BaseModel):
    model_config = ConfigDict(frozen=True)

    topic_id: TopicId = Field(description='Topic identifier')
    name: str = Field(description='Display name')
    short_name: str = Field(description='Short display name')
    description: str = Field(description='One-line topic description')
    allow_passage_mode: bool = Field(
        description='Whether the topic can be practiced as a passage'
    )
    supports_deterministic_grading: bool = Field(
        description='Whether answers can be graded by string comparison'
    )


TOPICS: Dict[TopicId, TopicDef] = {
    topic.topic_id: topic
    for topic in (
        TopicDef(
            topic_id=TopicId.VERBS,
            name='Right Form of Verbs',
            short_name='VERBS',
            description='Correct usage of verbs in context.',
            allow_passage_mode=True,
            supports_deterministic_grading=True,
        ),
        TopicDef(
            topic_id=TopicId.TRANSFORMATION,
            name='Transformation',
            short_name='TRANSFORM',
            description='Simple, Complex, Compound, Degrees.',
            allow_passage_mode=False,
            supports_deterministic_grading=False,
        ),
        TopicDef(
            topic_id=TopicId.COMPLETING,
            name='Completing Sentences',
            short_name='COMPLETE',
            description='Finish with logical clauses.',
            allow_passage_mode=False,
            supports_deterministic_grading=False,
        ),
        TopicDef(
            topic_id=TopicId.NARRATION,
            name='Narration',
            short_name='NARRATION',
            description='Direct and Indirect speech.',
            allow_passage_mode=True,
            supports_deterministic_grading=False,
        ),
        TopicDef(
            topic_id=TopicId.VOICE,
            name='Voice Change',
            short_name='VOICE',
            description='Active to Passive conversion.',
            allow_passage_mode=False,
            supports_deterministic_grading=False,
        ),
        TopicDef(
            topic_id=TopicId.PREPOSITION,
            name='Appropriate Prepositions',
            short_name='PREPOSITION',
            description='Fix the correct preposition.',
            allow_passage_mode=True,
            supports_deterministic_grading=True,
        ),
        TopicDef(
            topic_id=TopicId.ARTICLES,
            name='Articles',
            short_name='ARTICLES',
            description='A, An, The, and Cross (x).',
            allow_passage_mode=True,
            supports_deterministic_grading=True,
        ),
    )
}


def get_topic(topic_id: TopicId) -> TopicDef:
    return TOPICS[TopicId(topic_id)]


def list_topics() -> List[TopicDef]:
    return list(TOPICS.values())
