import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends

from hsc_grammar.api.dependencies import (
    get_evaluation_dispatcher,
    get_llm_service_dependency,
)
from hsc_grammar.api.schemas.question import (
    EvaluateAnswersRequestSchema,
    GenerateQuestionRequestSchema,
)
from hsc_grammar.core.entities.evaluation_result import EvaluationResult
from hsc_grammar.core.entities.generation_result import GenerationResult
from hsc_grammar.core.interfaces.llm_provider import LLMProvider
from hsc_grammar.core.services.evaluation_dispatcher import (
    EvaluationDispatcher,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    '/generate/',
    response_model=GenerationResult,
    summary='Generate a practice question',
    description=(
        'Generates a question for the topic, mode and difficulty. '
        'Generation failures are returned as status "failed" with an '
        'error placeholder question.'
    ),
)
async def generate_question(
    llm_service: Annotated[LLMProvider, Depends(get_llm_service_dependency)],
    request: Annotated[GenerateQuestionRequestSchema, Body()],
) -> GenerationResult:
    result = await llm_service.generate_question(
        topic_id=request.topic_id,
        mode=request.mode,
        difficulty=request.difficulty,
    )
    if not result.is_ok:
        logger.warning(f'Returning error question: {result.reason}')
    return result


@router.post(
    '/evaluate/',
    response_model=EvaluationResult,
    summary="Evaluate a learner's answers",
)
async def evaluate_answers(
    dispatcher: Annotated[
        EvaluationDispatcher, Depends(get_evaluation_dispatcher)
    ],
    request: Annotated[EvaluateAnswersRequestSchema, Body()],
) -> EvaluationResult:
    """
    Gap-fill topics with an answer key are scored locally,
    everything else is graded by the LLM.
    """
    return await dispatcher.evaluate(request.question, request.answers)
