from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hsc_grammar.core.enums import EvaluatorKind
from hsc_grammar.core.texts import Messages, get_text


class GapEvaluation(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    is_correct: bool = Field(description='Whether the gap is answered right')
    correct_answer: str = Field(description='Canonical correct answer')
    explanation: str = Field(description='Grammar rule explanation')


class EvaluationResult(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    overall_score: int = Field(ge=0, le=100, description='Score 0-100')
    overall_feedback: str = Field(description='Overall feedback')
    details: Dict[str, GapEvaluation] = Field(
        default_factory=dict, description='Verdict per gap id (or "main")'
    )
    evaluated_by: Optional[EvaluatorKind] = Field(
        default=None, description='Which evaluator produced the result'
    )

    @classmethod
    def failed(cls) -> 'EvaluationResult':
        """Default result returned when remote grading fails."""
        return cls(
            overall_score=0,
            overall_feedback=get_text(Messages.EVALUATION_ERROR),
            details={},
            evaluated_by=EvaluatorKind.REMOTE,
        )
