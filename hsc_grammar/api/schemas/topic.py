from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TopicSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    topic_id: str = Field(description='Topic identifier')
    name: str = Field(description='Display name')
    short_name: str = Field(description='Short display name')
    description: str = Field(description='Topic description')
    allow_passage_mode: bool = Field(
        description='Whether PASSAGE mode can be requested'
    )
    supports_deterministic_grading: bool = Field(
        description='Whether answers are graded without the LLM'
    )
