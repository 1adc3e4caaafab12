import json
import logging
from typing import Dict, Mapping

from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, ConfigDict, Field

from hsc_grammar.config import settings
from hsc_grammar.core.entities.evaluation_result import (
    EvaluationResult,
    GapEvaluation,
)
from hsc_grammar.core.entities.practice_question import PracticeQuestion
from hsc_grammar.core.enums import EvaluatorKind
from hsc_grammar.core.texts import Messages, get_text
from hsc_grammar.llm.evaluators.prompt_templates import (
    BASE_SYSTEM_PROMPT_FOR_EVALUATION,
    USER_PROMPT_FOR_EVALUATION,
)
from hsc_grammar.llm.llm_base import BaseLLMService

logger = logging.getLogger(__name__)


class GapEvaluationLLMOutput(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    is_correct: bool = Field(
        alias='isCorrect', description='Whether the answer is correct'
    )
    correct_answer: str = Field(
        alias='correctAnswer', description='Correct Answer'
    )
    explanation: str = Field(
        description=(
            'Rule: the specific grammar rule in mixed Bangla and English. '
            'Required for correct and wrong answers alike.'
        )
    )


class EvaluationLLMOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    overall_score: int = Field(
        alias='overallScore', ge=0, le=100, description='Score from 0 to 100'
    )
    overall_feedback: str = Field(
        alias='overallFeedback', description='Short encouraging feedback'
    )
    details: Dict[str, GapEvaluationLLMOutput] = Field(
        description='Evaluation per gap id (or "main")'
    )


class RemoteEvaluator:
    def __init__(self, llm_service: BaseLLMService):
        self.llm_service = llm_service

    async def evaluate(
        self,
        question: PracticeQuestion,
        answers: Mapping[str, str],
    ) -> EvaluationResult:
        """
        Grade free-form answers with the LLM.

        Never raises: transport, parsing and schema failures produce the
        default failed result.
        """
        try:
            parser = PydanticOutputParser(pydantic_object=EvaluationLLMOutput)

            chat_prompt = ChatPromptTemplate.from_messages(
                [
                    ('system', BASE_SYSTEM_PROMPT_FOR_EVALUATION),
                    ('user', USER_PROMPT_FOR_EVALUATION),
                ]
            )

            chain = await self.llm_service.create_llm_chain(
                chat_prompt,
                parser,
                max_tokens=settings.evaluation_max_tokens,
                json_mode=True,
            )

            request_data = {
                'question_text': question.question_text,
                'instruction': question.instruction,
                'topic': question.topic_id.value,
                'user_answers': json.dumps(dict(answers), ensure_ascii=False),
                'answer_key': json.dumps(
                    question.flat_answer_key(), ensure_ascii=False
                ),
                'format_instructions': parser.get_format_instructions(),
            }

            llm_output: EvaluationLLMOutput = (
                await self.llm_service.run_llm_chain(
                    chain=chain,
                    input_data=request_data,
                )
            )
            if not isinstance(llm_output, EvaluationLLMOutput):
                raise ValueError(
                    f'Unexpected LLM output: {type(llm_output).__name__}'
                )
        except Exception as e:
            logger.error(
                f'Remote evaluation failed for {question}: {e}',
                exc_info=True,
            )
            return EvaluationResult.failed()

        return EvaluationResult(
            overall_score=llm_output.overall_score,
            overall_feedback=llm_output.overall_feedback,
            details={
                key_id: GapEvaluation(
                    is_correct=detail.is_correct,
                    correct_answer=detail.correct_answer,
                    explanation=detail.explanation.strip()
                    or f'Rule: {get_text(Messages.DEFAULT_RULE)}',
                )
                for key_id, detail in llm_output.details.items()
            },
            evaluated_by=EvaluatorKind.REMOTE,
        )
