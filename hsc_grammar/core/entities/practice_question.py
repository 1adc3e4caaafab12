from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from hsc_grammar.core.enums import DifficultyLevel, PracticeMode, TopicId
from hsc_grammar.core.texts import Messages, get_text
from hsc_grammar.core.value_objects.answer_key import (
    AnswerKeyEntry,
    from_flat_answer_key,
    to_flat_answer_key,
)

MAIN_ANSWER_KEY = 'main'


class PracticeQuestion(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    topic_id: TopicId = Field(description='Grammar topic')
    mode: PracticeMode = Field(description='Single sentence or passage')
    difficulty: DifficultyLevel = Field(description='Difficulty level')
    question_text: str = Field(description='Prompt shown to the learner')
    instruction: str = Field(description='Short task instruction')
    gaps: Optional[List[int]] = Field(
        default=None, description='Ordered gap numbers for gap-fills'
    )
    answer_key: Dict[str, AnswerKeyEntry] = Field(
        default_factory=dict,
        description='Correct answer and rule per gap id (or "main")',
    )

    @field_validator('answer_key', mode='before')
    @classmethod
    def accept_flat_answer_key(cls, value: Any) -> Any:
        # {"1": "went", "1_rule": "..."} form sent by older clients
        if isinstance(value, dict) and all(
            isinstance(v, str) for v in value.values()
        ):
            return from_flat_answer_key(value)
        return value

    def keys_to_check(self) -> List[str]:
        if self.gaps:
            return [str(gap) for gap in self.gaps]
        return [MAIN_ANSWER_KEY]

    def has_answer_key(self) -> bool:
        return bool(self.answer_key)

    def flat_answer_key(self) -> Dict[str, str]:
        return to_flat_answer_key(self.answer_key)

    @classmethod
    def error_question(
        cls,
        topic_id: TopicId,
        mode: PracticeMode,
        difficulty: DifficultyLevel,
    ) -> 'PracticeQuestion':
        """Well-formed placeholder returned when generation fails."""
        return cls(
            topic_id=topic_id,
            mode=mode,
            difficulty=difficulty,
            question_text=get_text(Messages.ERROR_QUESTION_TEXT),
            instruction=get_text(Messages.ERROR_QUESTION_INSTRUCTION),
            gaps=[],
            answer_key={},
        )

    def __str__(self):
        return (
            f'PracticeQuestion(topic_id={self.topic_id.value}, '
            f'mode={self.mode.value}, '
            f'difficulty={self.difficulty.value}, '
            f'gaps={self.gaps}, '
            f'answer_key_ids={list(self.answer_key)})'
        )
