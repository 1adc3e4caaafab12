from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from hsc_grammar.core.entities.practice_question import PracticeQuestion
from hsc_grammar.core.enums import GenerationStatus


class QuestionGenerated(BaseModel):
    status: Literal[GenerationStatus.OK] = GenerationStatus.OK
    question: PracticeQuestion = Field(description='Generated question')

    @property
    def is_ok(self) -> bool:
        return True


class GenerationFailed(BaseModel):
    status: Literal[GenerationStatus.FAILED] = GenerationStatus.FAILED
    reason: str = Field(description='Diagnostic reason of the failure')
    question: PracticeQuestion = Field(
        description='Error placeholder question for uniform rendering'
    )

    @property
    def is_ok(self) -> bool:
        return False


GenerationResult = Annotated[
    Union[QuestionGenerated, GenerationFailed],
    Field(discriminator='status'),
]
