from typing import Annotated

from fastapi import APIRouter, Body, Depends

from hsc_grammar.api.dependencies import get_llm_service_dependency
from hsc_grammar.api.schemas.grammar import (
    ExplainRequestSchema,
    ExplainResponseSchema,
)
from hsc_grammar.core.interfaces.llm_provider import LLMProvider

router = APIRouter()


@router.post(
    '/explain/',
    response_model=ExplainResponseSchema,
    summary='Explain a grammar question',
)
async def explain_grammar(
    llm_service: Annotated[LLMProvider, Depends(get_llm_service_dependency)],
    request: Annotated[ExplainRequestSchema, Body()],
) -> ExplainResponseSchema:
    explanation = await llm_service.explain_grammar(request.query)
    return ExplainResponseSchema(explanation=explanation)
