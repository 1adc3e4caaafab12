from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from hsc_grammar.core.configs.topics import get_topic
from hsc_grammar.core.entities.practice_question import PracticeQuestion
from hsc_grammar.core.enums import DifficultyLevel, PracticeMode, TopicId


class GenerateQuestionRequestSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    topic_id: TopicId = Field(description='Grammar topic')
    mode: PracticeMode = Field(
        default=PracticeMode.SINGLE, description='Single sentence or passage'
    )
    difficulty: DifficultyLevel = Field(
        default=DifficultyLevel.MEDIUM, description='Difficulty level'
    )

    @model_validator(mode='after')
    def check_passage_supported(self) -> 'GenerateQuestionRequestSchema':
        topic = get_topic(self.topic_id)
        if self.mode == PracticeMode.PASSAGE and not topic.allow_passage_mode:
            raise ValueError(
                f'Topic {self.topic_id.value} does not support passage mode'
            )
        return self


class EvaluateAnswersRequestSchema(BaseModel):
    question: PracticeQuestion = Field(
        description='Question as returned by the generate endpoint'
    )
    answers: Dict[str, Optional[str]] = Field(
        default_factory=dict,
        description='Learner input per gap id (or "main")',
    )
